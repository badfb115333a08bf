"""Core schemas for the application."""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class HealthCheck(BaseModel):
    """Schema for health check response."""
    service_name: str
    status: str


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str
    code: str


class Pagination(BaseModel):
    limit: int
    offset: int
    count: int


class DataResponse(BaseModel, Generic[DataT]):
    """Envelope for a single record."""
    data: DataT
    message: str


class ListResponse(BaseModel, Generic[DataT]):
    """Envelope for a page of records."""
    data: List[DataT]
    message: str
    pagination: Pagination


class UpdateResponse(BaseModel, Generic[DataT]):
    """Envelope for a PATCH; lists the fields the request changed."""
    model_config = ConfigDict(populate_by_name=True)

    data: DataT
    message: str
    updated_fields: List[str] = Field(alias="updatedFields")


class ORMModel(BaseModel):
    """Base for schemas read straight from ORM rows."""
    model_config = ConfigDict(from_attributes=True)


class WriteModel(BaseModel):
    """Base for request bodies; unknown keys are rejected."""
    model_config = ConfigDict(extra="forbid")
