"""Module: main."""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from hello_api.api.api import api_router
from hello_api.core.config import Settings, settings as default_settings
from hello_api.core.logging import configure_logging
from hello_api.core.middleware import CaseInsensitiveRouteMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.include_router(api_router, prefix="/api")

    # OpenAPI paths are the flattened, prefixed route list on every FastAPI release.
    app.add_middleware(
        CaseInsensitiveRouteMiddleware,
        paths=list(app.openapi()["paths"]),
    )

    logger.info("%s %s ready", settings.app_name, settings.app_version)
    return app


app = create_app()


# Console entry point: `hello-api` serves the app on the configured address.
def serve() -> None:
    uvicorn.run(
        app,
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    serve()
