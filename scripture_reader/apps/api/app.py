"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from scripture_reader.apps.api.middleware import correlation_id_middleware
from scripture_reader.core.exceptions import ContentError
from scripture_reader.core.logging import get_logger
from scripture_reader.services import ServiceContainer
from scripture_reader.services import runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register the app's service container for the command surface."""
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
        try:
            root = services.content.content_root()
            logger.info("content root resolved", extra={"root": str(root)})
        except ContentError as exc:
            # Queries report the failure per request; startup stays up.
            logger.warning("content root unavailable at startup", extra={"error": str(exc)})
    yield


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(title="Scripture Reader", lifespan=lifespan)
    app.state.services = services
    runtime.set_services(services)
    app.middleware("http")(correlation_id_middleware)

    from .routes import health, scripture  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(scripture.router)
    return app


__all__ = ["create_app", "lifespan"]
