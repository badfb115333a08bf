"""Pydantic schemas for category data validation."""

from datetime import datetime
from typing import Literal, Optional
from pydantic import Field

from components.core.schemas import ORMModel, WriteModel

CategoryType = Literal["income", "expense"]
COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class CategoryCreate(WriteModel):
    """Schema for category creation and full replacement."""
    name: str = Field(..., min_length=1, max_length=100)
    type: CategoryType = "expense"
    color: Optional[str] = Field(None, pattern=COLOR_PATTERN)
    icon: Optional[str] = Field(None, max_length=50)


class CategoryUpdate(WriteModel):
    """Schema for partial category update."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[CategoryType] = None
    color: Optional[str] = Field(None, pattern=COLOR_PATTERN)
    icon: Optional[str] = Field(None, max_length=50)


class Category(ORMModel):
    """Schema for category response."""
    id: int
    name: str
    type: str
    color: Optional[str] = None
    icon: Optional[str] = None
    created_at: datetime
    updated_at: datetime
