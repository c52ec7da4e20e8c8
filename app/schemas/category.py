from typing import Optional
from pydantic import BaseModel, Field


class Category(BaseModel):
    """Category schema"""
    id: int = Field(..., description="Category ID")
    name: str = Field(..., description="Display name")
    url: str = Field(..., description="Link target")
    icon: str = Field(..., description="Icon reference")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"id": 1, "name": "Category 1", "url": "http://example.com", "icon": "icon1"}
            ]
        }
    }


class CategoryCreate(BaseModel):
    """Category creation schema"""
    id: Optional[int] = Field(default=None, description="Ignored, the server assigns the ID")
    name: str = Field(..., description="Display name")
    url: str = Field(..., description="Link target")
    icon: str = Field(..., description="Icon reference")
