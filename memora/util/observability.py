"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Post created", post_id=str(post.id), tags=len(post.tag_ids))

    # Manual spans for critical operations
    with logfire.span("search_service.search", target_year=year):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from memora import __version__
from memora.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    - Development: local console output unless a token is provided
    - Production: cloud sending when a token is provided

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "memora-backend",
        "service_version": __version__,
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
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health probes.

    Spans carry the method, path and the caller's ``X-User-Id`` so a
    slow search can be tied back to a user.

    Args:
        app: FastAPI application instance
    """

    def _request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        headers = getattr(request, "headers", None)
        user_id = headers.get("x-user-id") if headers is not None else None
        if user_id:
            result["user_id"] = user_id
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the async engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Instrument httpx so calls to the tagging server are traced."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
