"""Budget endpoints for the API."""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.budget import schemas
from components.budget.models import Budget
from components.budget.repository import BudgetRepository
from components.core.init_db import get_db
from components.core.schemas import DataResponse, ListResponse, UpdateResponse
from components.user.models import User
from restapi.endpoints.auth import get_current_user
from restapi.endpoints.common import PageParams, patch_record, replace_record

router = APIRouter(
    prefix="/budgets",
    tags=["budgets"],
    responses={404: {"description": "Not found"}},
)


async def serialize(repo: BudgetRepository, budget: Budget, include_progress: bool = False) -> schemas.Budget:
    data = schemas.Budget.model_validate(budget)
    if include_progress:
        data.progress = schemas.BudgetProgress.model_validate(await repo.progress(budget))
    return data


@router.get("", response_model=ListResponse[schemas.Budget])
async def read_budgets(
    page: PageParams = Depends(),
    include_progress: bool = Query(False, description="Embed spent/remaining/percentage"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get budgets, newest period first."""
    repo = BudgetRepository(db, current_user.id)
    budgets = await repo.list(skip=page.offset, limit=page.limit)
    return ListResponse[schemas.Budget](
        data=[await serialize(repo, b, include_progress) for b in budgets],
        message="Budgets retrieved successfully",
        pagination=page.pagination(len(budgets)),
    )


@router.post("", response_model=DataResponse[schemas.Budget], status_code=status.HTTP_201_CREATED)
async def create_budget(
    budget: schemas.BudgetCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Create a new budget."""
    repo = BudgetRepository(db, current_user.id)
    created = await repo.insert(budget.model_dump())
    return DataResponse[schemas.Budget](
        data=await serialize(repo, created),
        message="Budget created successfully",
    )


@router.get("/{budget_id}", response_model=DataResponse[schemas.Budget])
async def read_budget(
    budget_id: int,
    include_progress: bool = Query(False, description="Embed spent/remaining/percentage"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get a specific budget by ID."""
    repo = BudgetRepository(db, current_user.id)
    return DataResponse[schemas.Budget](
        data=await serialize(repo, await repo.get(budget_id), include_progress),
        message="Budget retrieved successfully",
    )


@router.get("/{budget_id}/progress", response_model=DataResponse[schemas.BudgetProgress])
async def read_budget_progress(
    budget_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """
    Get budget progress computed from the current transactions.

    Returns:
    - Amount of the budget and the amount spent in its window
    - Remaining amount (negative when overspent)
    - Percentage spent, not capped at 100
    - The date window the transactions were taken from
    """
    repo = BudgetRepository(db, current_user.id)
    progress = await repo.progress(await repo.get(budget_id))
    return DataResponse[schemas.BudgetProgress](
        data=schemas.BudgetProgress.model_validate(progress),
        message="Budget progress calculated successfully",
    )


@router.patch("/{budget_id}", response_model=UpdateResponse[schemas.Budget])
async def update_budget(
    budget_id: int,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Update only the supplied fields of a budget."""
    repo = BudgetRepository(db, current_user.id)
    updated, fields = await patch_record(
        repo, budget_id, payload, schemas.BudgetUpdate, schemas.BudgetCreate
    )
    return UpdateResponse[schemas.Budget](
        data=await serialize(repo, updated),
        message="Budget updated successfully",
        updated_fields=fields,
    )


@router.put("/{budget_id}", response_model=DataResponse[schemas.Budget])
async def replace_budget(
    budget_id: int,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Replace a budget; every required field must be supplied."""
    repo = BudgetRepository(db, current_user.id)
    replaced = await replace_record(repo, budget_id, payload, schemas.BudgetCreate)
    return DataResponse[schemas.Budget](
        data=await serialize(repo, replaced),
        message="Budget replaced successfully",
    )


@router.delete("/{budget_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_budget(
    budget_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Response:
    """Delete a budget."""
    await BudgetRepository(db, current_user.id).delete(budget_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
