"""
Main FastAPI application entry point.

Builds the Wayfinder application: a path resolver and a routes feed in
front of a JSON:API content repository.

Middleware (outermost first):
    TraceMiddleware: X-Trace-Id per request
    LanguageNegotiationMiddleware: negotiated content language
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_content_catalog, get_language_manager, get_logger
from src.presentation.routers import frontend_router, system_router
from src.presentation.routers.api.frontend.errors import register_exception_handlers
from src.presentation.routers.api.middleware.language_middleware import (
    LanguageNegotiationMiddleware,
)
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup loads the content catalog so a broken snapshot fails the boot
    instead of the first request.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    catalog = get_content_catalog()
    get_logger().info(
        "Application started",
        environment=settings.environment.value,
        jsonapi_base_path=settings.jsonapi_base_path,
        routes_enabled=settings.routes_enabled,
        langcodes=catalog.langcodes,
    )

    yield


app = FastAPI(
    title=settings.app_name,
    description="Path resolver and routes feed for headless frontends",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Starlette runs the last added middleware first
app.add_middleware(LanguageNegotiationMiddleware, languages=get_language_manager)
app.add_middleware(TraceMiddleware)

# JSON:API error documents for every escaped error
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(frontend_router)
