"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from echofinder.config import Settings
from echofinder.interface.api.middleware import CorrelationIdMiddleware
from echofinder.interface.api.routes import health, invites, users
from echofinder.interface.error import CORRELATION_ID_HEADER, register_error_handlers
from echofinder.util.di.container import create_container, setup_di
from echofinder.util.observability import instrument_fastapi

API_PREFIX = "/api"


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a test container.
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="EchoFinder API",
        description="Backend API for EchoFinder - invite-only user onboarding",
        version=settings.version,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            CORRELATION_ID_HEADER,
        ],
        expose_headers=["Content-Length", "Content-Type", CORRELATION_ID_HEADER],
        max_age=600,
    )
    app_instance.add_middleware(CorrelationIdMiddleware)

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router, prefix=API_PREFIX)
    app_instance.include_router(invites.router, prefix=API_PREFIX)
    app_instance.include_router(users.router, prefix=API_PREFIX)

    return app_instance
