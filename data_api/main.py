"""FastAPI application."""

import logging
import socket
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from data_api.api.error_handlers import register_error_handlers
from data_api.api.info import router as info_router
from data_api.api.records import router as records_router
from data_api.core.config import settings
from data_api.core.observability import setup_logging
from data_api.models import ServiceInfo
from data_api.services import RecordStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    if app.state.configure_logging:
        info: ServiceInfo = app.state.service_info
        setup_logging(
            settings.log_level,
            settings.log_format,
            info.standard_log_fields(socket.gethostname()),
        )
        logger.info(
            "Service started successfully.",
            extra={"mode": "init", "argv": sys.argv},
        )
    yield
    logger.info("Service shutting down", extra={"mode": "shutdown"})


def create_app(
    store: RecordStore | None = None,
    service_info: ServiceInfo | None = None,
    configure_logging: bool = False,
) -> FastAPI:
    """Build an application owning its own record store.

    Args:
        store: Record store to serve (a fresh empty one by default)
        service_info: Service identity (named from settings by default)
        configure_logging: Set up structured logging on startup

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Data API",
        description="Keyed record store exposed over HTTP",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else RecordStore()
    app.state.service_info = service_info or ServiceInfo.create(settings.service_name)
    app.state.configure_logging = configure_logging

    app.include_router(info_router, tags=["info"])
    app.include_router(records_router, tags=["records"])
    register_error_handlers(app)

    return app


app = create_app(configure_logging=True)
