"""Account endpoints for the API."""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.account import schemas
from components.account.repository import AccountRepository
from components.core.init_db import get_db
from components.core.schemas import DataResponse, ListResponse, UpdateResponse
from components.user.models import User
from restapi.endpoints.auth import get_current_user
from restapi.endpoints.common import PageParams, patch_record, replace_record

router = APIRouter(
    prefix="/accounts",
    tags=["accounts"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=ListResponse[schemas.Account])
async def read_accounts(
    page: PageParams = Depends(),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get accounts ordered by name."""
    accounts = await AccountRepository(db, current_user.id).list(skip=page.offset, limit=page.limit)
    return ListResponse[schemas.Account](
        data=[schemas.Account.model_validate(a) for a in accounts],
        message="Accounts retrieved successfully",
        pagination=page.pagination(len(accounts)),
    )


@router.post("", response_model=DataResponse[schemas.Account], status_code=status.HTTP_201_CREATED)
async def create_account(
    account: schemas.AccountCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Create a new account."""
    created = await AccountRepository(db, current_user.id).insert(account.model_dump())
    return DataResponse[schemas.Account](
        data=schemas.Account.model_validate(created),
        message="Account created successfully",
    )


@router.get("/{account_id}", response_model=DataResponse[schemas.Account])
async def read_account(
    account_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get a specific account by ID."""
    account = await AccountRepository(db, current_user.id).get(account_id)
    return DataResponse[schemas.Account](
        data=schemas.Account.model_validate(account),
        message="Account retrieved successfully",
    )


@router.patch("/{account_id}", response_model=UpdateResponse[schemas.Account])
async def update_account(
    account_id: int,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Update only the supplied fields of an account."""
    repo = AccountRepository(db, current_user.id)
    updated, fields = await patch_record(
        repo, account_id, payload, schemas.AccountUpdate, schemas.AccountCreate
    )
    return UpdateResponse[schemas.Account](
        data=schemas.Account.model_validate(updated),
        message="Account updated successfully",
        updated_fields=fields,
    )


@router.put("/{account_id}", response_model=DataResponse[schemas.Account])
async def replace_account(
    account_id: int,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Replace an account; omitted optional fields fall back to their defaults."""
    repo = AccountRepository(db, current_user.id)
    replaced = await replace_record(repo, account_id, payload, schemas.AccountCreate)
    return DataResponse[schemas.Account](
        data=schemas.Account.model_validate(replaced),
        message="Account replaced successfully",
    )


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    account_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Response:
    """Delete an account. Its transactions keep existing without an account."""
    await AccountRepository(db, current_user.id).delete(account_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
