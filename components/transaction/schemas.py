"""Pydantic schemas for transaction data validation."""

from datetime import date as date_type, datetime
from decimal import Decimal
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from components.core.schemas import ORMModel, WriteModel

TransactionType = Literal["income", "expense", "transfer"]


class TransactionCreate(WriteModel):
    """Schema for transaction creation and full replacement."""
    amount: Decimal = Field(..., max_digits=12, decimal_places=2)
    type: TransactionType
    date: date_type
    description: Optional[str] = Field(None, max_length=255)
    category_id: Optional[int] = None
    account_id: Optional[int] = None


class TransactionUpdate(WriteModel):
    """Schema for partial transaction update."""
    amount: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
    type: Optional[TransactionType] = None
    date: Optional[date_type] = None
    description: Optional[str] = Field(None, max_length=255)
    category_id: Optional[int] = None
    account_id: Optional[int] = None


class Transaction(ORMModel):
    """Schema for transaction response."""
    id: int
    amount: float
    type: str
    date: date_type
    description: Optional[str] = None
    category_id: Optional[int] = None
    account_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class TransactionImportError(BaseModel):
    """Schema for a rejected CSV row."""
    row: int
    message: str


class TransactionImportResponse(BaseModel):
    """Schema for CSV import response."""
    success: bool
    message: str
    imported: int = 0
    errors: Optional[List[TransactionImportError]] = None
