"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from memora import __version__
from memora.interface.api.routes import health, media, posts, search, tags
from memora.util.di.container import create_container, setup_di
from memora.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use, the production container if omitted
    """
    # Trace outbound calls to the tag suggestion service
    instrument_httpx()

    app_instance = FastAPI(
        title="Memora API",
        description="Backend API for Memora - tag photos and sounds by year, "
        "then find them again by weighted tags and year proximity",
        version=__version__,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-User-Id"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(media.router)
    app_instance.include_router(search.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
