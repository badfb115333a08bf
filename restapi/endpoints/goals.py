"""Goal endpoints for the API."""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db
from components.core.schemas import DataResponse, ListResponse, UpdateResponse
from components.goal import schemas
from components.goal.models import Goal
from components.goal.repository import GoalRepository
from components.user.models import User
from restapi.endpoints.auth import get_current_user
from restapi.endpoints.common import PageParams, patch_record, replace_record

router = APIRouter(
    prefix="/goals",
    tags=["goals"],
    responses={404: {"description": "Not found"}},
)


def serialize(repo: GoalRepository, goal: Goal, include_progress: bool = False) -> schemas.Goal:
    data = schemas.Goal.model_validate(goal)
    if include_progress:
        data.progress = schemas.GoalProgress.model_validate(repo.progress(goal))
    return data


@router.get("", response_model=ListResponse[schemas.Goal])
async def read_goals(
    page: PageParams = Depends(),
    include_progress: bool = Query(False, description="Embed completion percentage"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get goals, soonest target date first."""
    repo = GoalRepository(db, current_user.id)
    goals = await repo.list(skip=page.offset, limit=page.limit)
    return ListResponse[schemas.Goal](
        data=[serialize(repo, g, include_progress) for g in goals],
        message="Goals retrieved successfully",
        pagination=page.pagination(len(goals)),
    )


@router.post("", response_model=DataResponse[schemas.Goal], status_code=status.HTTP_201_CREATED)
async def create_goal(
    goal: schemas.GoalCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Create a new goal."""
    repo = GoalRepository(db, current_user.id)
    created = await repo.insert(goal.model_dump())
    return DataResponse[schemas.Goal](
        data=serialize(repo, created),
        message="Goal created successfully",
    )


@router.get("/{goal_id}", response_model=DataResponse[schemas.Goal])
async def read_goal(
    goal_id: int,
    include_progress: bool = Query(False, description="Embed completion percentage"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get a specific goal by ID."""
    repo = GoalRepository(db, current_user.id)
    return DataResponse[schemas.Goal](
        data=serialize(repo, await repo.get(goal_id), include_progress),
        message="Goal retrieved successfully",
    )


@router.get("/{goal_id}/progress", response_model=DataResponse[schemas.GoalProgress])
async def read_goal_progress(
    goal_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get goal completion; percentage may exceed 100 once the target is passed."""
    repo = GoalRepository(db, current_user.id)
    progress = repo.progress(await repo.get(goal_id))
    return DataResponse[schemas.GoalProgress](
        data=schemas.GoalProgress.model_validate(progress),
        message="Goal progress calculated successfully",
    )


@router.patch("/{goal_id}", response_model=UpdateResponse[schemas.Goal])
async def update_goal(
    goal_id: int,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Update only the supplied fields of a goal."""
    repo = GoalRepository(db, current_user.id)
    updated, fields = await patch_record(
        repo, goal_id, payload, schemas.GoalUpdate, schemas.GoalCreate
    )
    return UpdateResponse[schemas.Goal](
        data=serialize(repo, updated),
        message="Goal updated successfully",
        updated_fields=fields,
    )


@router.put("/{goal_id}", response_model=DataResponse[schemas.Goal])
async def replace_goal(
    goal_id: int,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Replace a goal; every required field must be supplied."""
    repo = GoalRepository(db, current_user.id)
    replaced = await replace_record(repo, goal_id, payload, schemas.GoalCreate)
    return DataResponse[schemas.Goal](
        data=serialize(repo, replaced),
        message="Goal replaced successfully",
    )


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(
    goal_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Response:
    """Delete a goal."""
    await GoalRepository(db, current_user.id).delete(goal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
