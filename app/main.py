from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.middleware.cors import CORSMiddleware
import structlog

from app.core.config import settings
from app.api.api import api_router
from app.core.exceptions import setup_exception_handlers
from app.utils.logger import setup_logging

# Setup structured logging
setup_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info(
        "Starting up application",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        host=settings.HOST,
        port=settings.PORT,
    )

    yield

    # Shutdown
    logger.info("Shutting down application")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    openapi_url=settings.OPENAPI_URL,
    docs_url=None,
    redoc_url=None,
    openapi_tags=[
        {"name": "Category", "description": "Category operations"},
    ],
    lifespan=lifespan,
)

# Set up CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin).rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Set up exception handlers
setup_exception_handlers(app)

# Include API router
app.include_router(api_router)


# Health check endpoint
@app.get("/health", include_in_schema=False)
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "version": settings.APP_VERSION}


# Swagger UI, reachable both at the docs root and at its index.html
@app.get(settings.DOCS_URL, include_in_schema=False)
@app.get(f"{settings.DOCS_URL.rstrip('/')}/index.html", include_in_schema=False)
async def swagger_ui_html():
    """Interactive API documentation"""
    return get_swagger_ui_html(
        openapi_url=settings.OPENAPI_URL,
        title=f"{settings.PROJECT_NAME} - Swagger UI",
    )
