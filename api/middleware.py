"""
Consolidated middleware for the MenuBot API
"""

import time
import logging
from datetime import datetime
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import MenuBotError

logger = logging.getLogger("menubot.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def error_body(code: str, message: str, details=None) -> dict:
    """Standard error payload shared by all handlers"""
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {
        "success": False,
        "error": error,
        "timestamp": datetime.utcnow().isoformat(),
    }


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started %s %s",
            request.method,
            request.url.path,
            extra={
                "request_id": request_id,
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed %s %s: %s (%.4fs)",
                request.method,
                request.url.path,
                exc,
                process_time,
                extra={"request_id": request_id},
                exc_info=True,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            "Request completed %s %s -> %d (%.4fs)",
            request.method,
            request.url.path,
            response.status_code,
            process_time,
            extra={"request_id": request_id},
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=422,
        content=error_body(
            "VALIDATION_ERROR",
            "Request validation failed",
            jsonable_encoder(exc.errors()),
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(f"HTTP_{exc.status_code}", str(exc.detail)),
    )


async def menubot_exception_handler(request: Request, exc: MenuBotError):
    """Handle service errors (validation, not found, conflict)"""
    logger.warning(f"{type(exc).__name__} on {request.url}: {exc}")

    code = exc.code or type(exc).__name__.upper()
    return JSONResponse(
        status_code=exc.http_status,
        content=error_body(code, exc.message, exc.details),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("INTERNAL_SERVER_ERROR", "An unexpected error occurred"),
    )
