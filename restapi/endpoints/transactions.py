"""Transaction endpoints for the API."""

import io
from datetime import date
from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, File, Query, Response, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.exceptions import BadRequestError
from components.core.init_db import get_db
from components.core.schemas import DataResponse, ListResponse, UpdateResponse
from components.transaction import schemas
from components.transaction.repository import TransactionRepository
from components.user.models import User
from restapi.endpoints.auth import get_current_user
from restapi.endpoints.common import PageParams, patch_record, replace_record

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
    responses={404: {"description": "Not found"}},
)


def serialize(transaction) -> schemas.Transaction:
    return schemas.Transaction.model_validate(transaction)


@router.get("", response_model=ListResponse[schemas.Transaction])
async def read_transactions(
    page: PageParams = Depends(),
    category_id: Optional[int] = Query(None, description="Only transactions in this category"),
    account_id: Optional[int] = Query(None, description="Only transactions on this account"),
    type: Optional[schemas.TransactionType] = Query(None, description="income, expense or transfer"),
    start_date: Optional[date] = Query(None, description="Inclusive lower date bound"),
    end_date: Optional[date] = Query(None, description="Inclusive upper date bound"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get transactions with optional filtering, newest first."""
    if start_date and end_date and start_date > end_date:
        raise BadRequestError("start_date must not be after end_date")

    repo = TransactionRepository(db, current_user.id)
    transactions = await repo.find_filtered(
        skip=page.offset,
        limit=page.limit,
        category_id=category_id,
        account_id=account_id,
        type=type,
        start_date=start_date,
        end_date=end_date,
    )
    return ListResponse[schemas.Transaction](
        data=[serialize(t) for t in transactions],
        message="Transactions retrieved successfully",
        pagination=page.pagination(len(transactions)),
    )


@router.post("", response_model=DataResponse[schemas.Transaction], status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction: schemas.TransactionCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Create a new transaction."""
    repo = TransactionRepository(db, current_user.id)
    created = await repo.insert(transaction.model_dump())
    return DataResponse[schemas.Transaction](
        data=serialize(created),
        message="Transaction created successfully",
    )


@router.post("/import", response_model=schemas.TransactionImportResponse)
async def import_transactions(
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """
    Import transactions from a CSV file.

    The CSV file must have the following columns:
    - date: YYYY-MM-DD
    - amount: signed decimal
    - type: income, expense or transfer

    Optional columns: description, category_id, account_id.
    Nothing is stored unless every row is valid.
    """
    if not (file.filename or "").lower().endswith(".csv"):
        raise BadRequestError("Invalid file format. Only CSV files (.csv) are supported.")

    repo = TransactionRepository(db, current_user.id)
    file_content = await file.read()
    success, message, errors, imported = await repo.import_csv(io.BytesIO(file_content))

    return schemas.TransactionImportResponse(
        success=success,
        message=message,
        imported=imported,
        errors=[schemas.TransactionImportError(**error) for error in errors] or None,
    )


@router.get("/{transaction_id}", response_model=DataResponse[schemas.Transaction])
async def read_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get a specific transaction by ID."""
    repo = TransactionRepository(db, current_user.id)
    return DataResponse[schemas.Transaction](
        data=serialize(await repo.get(transaction_id)),
        message="Transaction retrieved successfully",
    )


@router.patch("/{transaction_id}", response_model=UpdateResponse[schemas.Transaction])
async def update_transaction(
    transaction_id: int,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Update only the supplied fields of a transaction."""
    repo = TransactionRepository(db, current_user.id)
    updated, fields = await patch_record(
        repo, transaction_id, payload, schemas.TransactionUpdate, schemas.TransactionCreate
    )
    return UpdateResponse[schemas.Transaction](
        data=serialize(updated),
        message="Transaction updated successfully",
        updated_fields=fields,
    )


@router.put("/{transaction_id}", response_model=DataResponse[schemas.Transaction])
async def replace_transaction(
    transaction_id: int,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Replace a transaction; every required field must be supplied."""
    repo = TransactionRepository(db, current_user.id)
    replaced = await replace_record(repo, transaction_id, payload, schemas.TransactionCreate)
    return DataResponse[schemas.Transaction](
        data=serialize(replaced),
        message="Transaction replaced successfully",
    )


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Response:
    """Delete a transaction."""
    await TransactionRepository(db, current_user.id).delete(transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
