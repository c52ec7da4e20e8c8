from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

logger = structlog.get_logger()


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log malformed requests, then answer with FastAPI's default 422 body"""
    logger.warning(
        "Validation error",
        errors=exc.errors(),
        method=request.method,
        path=request.url.path,
    )

    return await request_validation_exception_handler(request, exc)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.exception(
        "Unhandled exception",
        exc_info=exc,
        path=request.url.path,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An internal error occurred",
            }
        },
    )


def setup_exception_handlers(app: FastAPI):
    """Set up exception handlers for the FastAPI app"""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
