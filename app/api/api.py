from fastapi import APIRouter

from app.api.endpoints import categories

api_router = APIRouter()

# Include routers
api_router.include_router(categories.router, prefix="/category", tags=["Category"])
