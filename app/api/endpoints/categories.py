from typing import List

from fastapi import APIRouter, Path, status
from fastapi.responses import JSONResponse
import structlog

from app.constants.category import (
    ASSIGNED_CATEGORY_ID,
    DELETABLE_CATEGORY_ID,
    MAX_CATEGORY_ID,
    SAMPLE_CATEGORIES,
)
from app.schemas.category import Category, CategoryCreate

logger = structlog.get_logger()

router = APIRouter()


@router.get(
    "",
    response_model=List[Category],
    operation_id="get_all_categories",
    responses={404: {"description": "Category not found"}},
)
async def get_all_categories():
    """カテゴリ一覧取得"""
    categories = [Category(**data) for data in SAMPLE_CATEGORIES]
    logger.debug("Listed categories", count=len(categories))
    return categories


@router.post(
    "",
    response_model=Category,
    operation_id="create_new_category",
    responses={
        200: {"description": "Category created"},
        404: {"description": "Category not found"},
    },
)
async def create_new_category(category_in: CategoryCreate):
    """カテゴリ作成（IDは常にサーバ側で付与）"""
    category = Category(
        id=ASSIGNED_CATEGORY_ID,
        name=category_in.name,
        url=category_in.url,
        icon=category_in.icon,
    )
    logger.info(
        "Category created",
        submitted_id=category_in.id,
        assigned_id=category.id,
        name=category.name,
    )
    return category


@router.delete(
    "/{id}",
    response_model=bool,
    operation_id="delete_category",
    responses={
        200: {"description": "Category deleted"},
        404: {"model": bool, "description": "Category not found"},
    },
)
async def delete_category(
    id: int = Path(..., ge=0, le=MAX_CATEGORY_ID, description="Category ID"),
):
    """カテゴリ削除"""
    if id == DELETABLE_CATEGORY_ID:
        logger.info("Category deleted", category_id=id)
        return True

    logger.info("Category not found", category_id=id)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=False)
