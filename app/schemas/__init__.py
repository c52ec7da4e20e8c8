from app.schemas.category import (
    Category,
    CategoryCreate,
)

__all__ = [
    # Category schemas
    "Category",
    "CategoryCreate",
]
