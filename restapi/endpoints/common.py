"""PATCH and PUT flows shared by the resource endpoints."""

from typing import Any, List, Mapping, Tuple, Type

from fastapi import Query
from pydantic import BaseModel

from components.core.config import get_settings
from components.core.repository import OwnedRepository
from components.core.schemas import Pagination
from components.core.updates import apply_full_replacement, apply_partial_update, validate_patch

settings = get_settings()


class PageParams:
    """limit/offset query parameters."""

    def __init__(
        self,
        limit: int = Query(50, ge=1, le=settings.PAGE_LIMIT_MAX, description="Number of records to return"),
        offset: int = Query(0, ge=0, description="Number of records to skip"),
    ):
        self.limit = limit
        self.offset = offset

    def pagination(self, count: int) -> Pagination:
        return Pagination(limit=self.limit, offset=self.offset, count=count)


async def patch_record(
    repo: OwnedRepository,
    record_id: int,
    payload: Mapping[str, Any],
    update_schema: Type[BaseModel],
    create_schema: Type[BaseModel],
) -> Tuple[Any, List[str]]:
    """
    Apply a partial update to an owned row.

    The merged record has to satisfy the full schema as well, so a PATCH
    cannot null out a required field or break a cross-field rule.
    """
    existing = await repo.get(record_id)
    patch = validate_patch(update_schema, payload)
    fields = list(create_schema.model_fields)
    result = apply_partial_update(repo.to_dict(existing, fields), patch, allowed_fields=fields)
    apply_full_replacement(create_schema, result.record)

    changes = {name: result.record[name] for name in result.updated_fields}
    record = await repo.update(record_id, changes)
    return record, result.updated_fields


async def replace_record(
    repo: OwnedRepository,
    record_id: int,
    payload: Mapping[str, Any],
    create_schema: Type[BaseModel],
) -> Any:
    """Replace every writable field of an owned row."""
    await repo.get(record_id)
    values = apply_full_replacement(create_schema, payload)
    return await repo.update(record_id, values)
