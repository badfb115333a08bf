"""Pydantic schemas for budget data validation."""

from datetime import date, datetime
from decimal import Decimal
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from components.core.schemas import ORMModel, WriteModel

BudgetPeriod = Literal["monthly", "weekly", "yearly"]


class BudgetCreate(WriteModel):
    """Schema for budget creation and full replacement."""
    name: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    period: BudgetPeriod = "monthly"
    category_id: Optional[int] = None
    start_date: date
    end_date: Optional[date] = None

    @model_validator(mode="after")
    def check_dates(self) -> "BudgetCreate":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class BudgetUpdate(WriteModel):
    """Schema for partial budget update."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    period: Optional[BudgetPeriod] = None
    category_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class BudgetProgress(BaseModel):
    """Schema for budget progress computed at read time."""
    model_config = ConfigDict(from_attributes=True)

    amount: float
    spent: float
    remaining: float
    percentage: float
    period_start: date
    period_end: date
    transaction_count: int
    is_over_budget: bool


class Budget(ORMModel):
    """Schema for budget response."""
    id: int
    name: str
    amount: float
    period: str
    category_id: Optional[int] = None
    start_date: date
    end_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime
    progress: Optional[BudgetProgress] = None
