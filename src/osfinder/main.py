import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from osfinder import __version__
from osfinder.api.middleware.error_handler import (
    handle_directory_error,
    handle_generic_error,
    handle_integrity_error,
    handle_validation_error,
)
from osfinder.api.middleware.logging import RequestLoggingMiddleware
from osfinder.api.v1 import router as v1_router
from osfinder.api.v1.health import router as health_router
from osfinder.config import settings
from osfinder.core.exceptions import DirectoryError
from osfinder.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(level=settings.log_level, json_format=settings.log_json)
    logger.info(f"Open Source Finder API {__version__} starting ({settings.app_env})")
    yield
    # Shutdown


def create_app() -> FastAPI:
    app = FastAPI(
        title="Open Source Finder API",
        description="Directory of open-source alternatives to proprietary software",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(DirectoryError, handle_directory_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_generic_error)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
