"""Pydantic schemas for account data validation."""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional
from pydantic import Field

from components.core.schemas import ORMModel, WriteModel

AccountType = Literal["checking", "savings", "credit", "cash", "investment"]


class AccountCreate(WriteModel):
    """Schema for account creation and full replacement."""
    name: str = Field(..., min_length=1, max_length=100)
    type: AccountType = "checking"
    balance: Decimal = Field(Decimal("0"), max_digits=12, decimal_places=2)
    currency: str = Field("USD", pattern=r"^[A-Z]{3}$")
    is_active: bool = True


class AccountUpdate(WriteModel):
    """Schema for partial account update."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[AccountType] = None
    balance: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
    currency: Optional[str] = Field(None, pattern=r"^[A-Z]{3}$")
    is_active: Optional[bool] = None


class Account(ORMModel):
    """Schema for account response."""
    id: int
    name: str
    type: str
    balance: float
    currency: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
