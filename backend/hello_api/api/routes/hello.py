"""Module: hello."""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()
logger = logging.getLogger(__name__)

GREETING = "Hello, I am trying out this deployment"


# Endpoint: constant greeting; query string, headers and body are ignored.
@router.get("", response_class=PlainTextResponse)
def get_hello():
    logger.debug("Serving greeting")
    return GREETING
