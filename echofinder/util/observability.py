"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Invite issued", invite_id=str(invite.id))

    # Manual spans for critical operations
    with logfire.span("accept_invite.execute"):
        ...

Raw invite tokens must never be passed to logfire. Log ids, or at most
`TokenHash.short()`.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncEngine

from echofinder.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending is decided in this order: OBSERVABILITY__SEND_TO_LOGFIRE
    when set, otherwise whether OBSERVABILITY__LOGFIRE_TOKEN is present.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": settings.service_name,
        "service_version": settings.version,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


# Request fields that carry raw bearer tokens
REDACTED_FIELDS = frozenset({"token"})


def _redact(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude=set(REDACTED_FIELDS))
    return value


def redact_request_attributes(attributes: dict[str, Any]) -> dict[str, Any]:
    """Strip raw tokens from the endpoint arguments logfire records.

    Validated arguments have token fields removed. Validation errors lose
    their `input`, which can echo the whole request body.
    """
    result = {**attributes}

    values = result.get("values")
    if isinstance(values, dict):
        result["values"] = {
            name: _redact(value)
            for name, value in values.items()
            if name not in REDACTED_FIELDS
        }

    errors = result.get("errors")
    if errors:
        result["errors"] = [
            {key: item for key, item in error.items() if key != "input"}
            if isinstance(error, dict)
            else error
            for error in errors
        ]

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = redact_request_attributes(attributes)

        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host

        return result

    # Headers are not captured: nothing secret travels in them today, but
    # invite links are opened from mail clients that add their own.
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,
    )
    logfire.info("SQLAlchemy instrumented")
