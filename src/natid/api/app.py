"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from natid.api.routes import health, validators
from natid.core.config import AppSettings
from natid.core.logging import prepare_logger
from natid.validators import ValidatorRegistry, create_registry

logger = logging.getLogger(__name__)


def _exposed_registry(settings: AppSettings) -> ValidatorRegistry:
    """Default registry narrowed to ``settings.api.enabled_validators`` when set."""
    registry = create_registry(settings)
    enabled = settings.api.enabled_validators
    if not enabled:
        return registry

    exposed = ValidatorRegistry()
    for key in enabled:
        exposed.register(key, registry.get(key))
    return exposed


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        prepare_logger("natid", settings.log_level)
        app.state.settings = settings
        app.state.registry = _exposed_registry(settings)
        logger.info("Serving validators: %s", ", ".join(app.state.registry.keys()))
        yield

    app = FastAPI(
        title=settings.api.title,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(validators.router)
    return app
