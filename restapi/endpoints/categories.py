"""Category endpoints for the API."""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.category import schemas
from components.category.repository import CategoryRepository
from components.core.init_db import get_db
from components.core.schemas import DataResponse, ListResponse, UpdateResponse
from components.user.models import User
from restapi.endpoints.auth import get_current_user
from restapi.endpoints.common import PageParams, patch_record, replace_record

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=ListResponse[schemas.Category])
async def read_categories(
    page: PageParams = Depends(),
    type: Optional[schemas.CategoryType] = Query(None, description="income or expense"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get categories ordered by name."""
    categories = await CategoryRepository(db, current_user.id).list(skip=page.offset, limit=page.limit, type=type)
    return ListResponse[schemas.Category](
        data=[schemas.Category.model_validate(c) for c in categories],
        message="Categories retrieved successfully",
        pagination=page.pagination(len(categories)),
    )


@router.post("", response_model=DataResponse[schemas.Category], status_code=status.HTTP_201_CREATED)
async def create_category(
    category: schemas.CategoryCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Create a new category."""
    created = await CategoryRepository(db, current_user.id).insert(category.model_dump())
    return DataResponse[schemas.Category](
        data=schemas.Category.model_validate(created),
        message="Category created successfully",
    )


@router.get("/{category_id}", response_model=DataResponse[schemas.Category])
async def read_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get a specific category by ID."""
    category = await CategoryRepository(db, current_user.id).get(category_id)
    return DataResponse[schemas.Category](
        data=schemas.Category.model_validate(category),
        message="Category retrieved successfully",
    )


@router.patch("/{category_id}", response_model=UpdateResponse[schemas.Category])
async def update_category(
    category_id: int,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Update only the supplied fields of a category."""
    repo = CategoryRepository(db, current_user.id)
    updated, fields = await patch_record(
        repo, category_id, payload, schemas.CategoryUpdate, schemas.CategoryCreate
    )
    return UpdateResponse[schemas.Category](
        data=schemas.Category.model_validate(updated),
        message="Category updated successfully",
        updated_fields=fields,
    )


@router.put("/{category_id}", response_model=DataResponse[schemas.Category])
async def replace_category(
    category_id: int,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Replace a category; omitted optional fields fall back to their defaults."""
    repo = CategoryRepository(db, current_user.id)
    replaced = await replace_record(repo, category_id, payload, schemas.CategoryCreate)
    return DataResponse[schemas.Category](
        data=schemas.Category.model_validate(replaced),
        message="Category replaced successfully",
    )


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Response:
    """Delete a category. Its transactions and budgets become uncategorized."""
    await CategoryRepository(db, current_user.id).delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
