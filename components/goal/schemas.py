"""Pydantic schemas for goal data validation."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from components.core.schemas import ORMModel, WriteModel


class GoalCreate(WriteModel):
    """Schema for goal creation and full replacement."""
    name: str = Field(..., min_length=1, max_length=100)
    target_amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    current_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    target_date: Optional[date] = None
    description: Optional[str] = Field(None, max_length=255)


class GoalUpdate(WriteModel):
    """Schema for partial goal update."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    target_amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    current_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    target_date: Optional[date] = None
    description: Optional[str] = Field(None, max_length=255)


class GoalProgress(BaseModel):
    """Schema for goal progress computed at read time."""
    model_config = ConfigDict(from_attributes=True)

    target_amount: float
    current_amount: float
    remaining: float
    percentage: float
    display_percentage: float
    is_completed: bool


class Goal(ORMModel):
    """Schema for goal response."""
    id: int
    name: str
    target_amount: float
    current_amount: float
    target_date: Optional[date] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    progress: Optional[GoalProgress] = None
