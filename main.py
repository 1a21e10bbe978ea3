"""
MenuBot FastAPI Application
Main entry point: chat webhook, JSON API, middleware and configuration
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager

from api.routes import health, kakao, menus, recommendations
from domain.models import init_database
from app.config import settings
from app.exceptions import MenuBotError
from app.logging_config import configure_logging
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    menubot_exception_handler,
    general_exception_handler,
)

configure_logging(settings)
_logger = logging.getLogger("menubot.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Seeds the in-memory menu catalog on startup.
    """
    _logger.info(f"Starting MenuBot in {settings.environment.value} mode")
    db = init_database()
    _logger.info(f"Catalog ready with {len(db.menus)} menus")
    try:
        yield
    finally:
        _logger.info("Shutting down MenuBot")


# Create FastAPI application with enhanced configuration
app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=(
        f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
    ),
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(MenuBotError, menubot_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(kakao.router, prefix=settings.api_prefix)
app.include_router(menus.router, prefix=settings.api_prefix)
app.include_router(recommendations.router, prefix=settings.api_prefix)
app.include_router(health.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
