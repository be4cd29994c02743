"""FastAPI application factory for ContactDesk."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import ContactDeskSettings, settings as default_settings
from .storage import Storage, build_storage

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("contactdesk").setLevel(level.upper())


def create_app(
    settings: ContactDeskSettings | None = None,
    storage: Storage | None = None,
) -> FastAPI:
    """Build the app around an explicitly constructed storage backend.

    When ``storage`` is omitted it is built from ``settings``. The app owns the
    storage lifecycle: it is initialised on startup and closed on shutdown.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)
    storage = storage or build_storage(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await storage.init()
        logger.info("Storage ready: %s", type(storage).__name__)
        yield
        await storage.close()

    app = FastAPI(title=settings.app_title, lifespan=lifespan)
    app.state.settings = settings
    app.state.storage = storage

    from .routers import activities, contacts, health, metrics

    app.include_router(metrics.router)
    app.include_router(contacts.router)
    app.include_router(activities.router)
    app.include_router(health.router)
    return app
