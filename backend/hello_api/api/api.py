"""Module: api."""

from fastapi import APIRouter

from hello_api.api.routes.hello import router as hello_router

api_router = APIRouter()

# Route name keeps the controller-style casing clients already call.
api_router.include_router(hello_router, prefix="/Hello", tags=["hello"])
