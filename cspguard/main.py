"""FastAPI application serving policy headers and the report endpoint."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from cspguard.api.report_routes import create_report_router
from cspguard.config.loader import get_settings, load_settings
from cspguard.config.presets import get_preset
from cspguard.logging_config import setup_logging
from cspguard.middleware.policy_headers import PolicyHeaders
from cspguard.policy.model import Policy

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    settings = get_settings()
    setup_logging(log_level=settings.log_level, json_format=settings.log_json)
    logger.info("cspguard_started", report_path=settings.report_path)
    yield
    logger.info("cspguard_stopped")


def create_app(policies: Iterable[Policy] | None = None) -> FastAPI:
    """Build the app.

    Without explicit ``policies`` the configured ``header_preset`` is used.
    """
    settings = load_settings()
    if policies is None:
        policies = [get_preset(settings.header_preset)]

    app = FastAPI(title="cspguard", lifespan=lifespan)
    app.add_middleware(PolicyHeaders, policies=list(policies))
    app.include_router(create_report_router(settings.report_path))
    return app
