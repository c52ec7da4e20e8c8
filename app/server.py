"""
Run the Category API with uvicorn.

Usage:
    category-api
    python -m app.server
"""
import uvicorn

from app.core.config import settings


def main() -> None:
    """Start the HTTP listener; a bind failure ends the process"""
    print(f"starting server on port {settings.PORT}")
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        workers=settings.WORKERS,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
