"""Partial (PATCH) and full (PUT) update semantics shared by all resources."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, NoReturn, Optional, Type

import pydantic
from pydantic import BaseModel

from components.core.exceptions import BadRequestError, ValidationError

# Marks a key that was sent without a value; such keys are dropped from a patch
UNSET: Any = object()


@dataclass
class PartialUpdate:
    """Result of merging a patch into an existing record."""
    record: Dict[str, Any]
    updated_fields: List[str] = field(default_factory=list)


LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")


def _field_name(loc: tuple) -> str:
    # Request errors are located as ("body", "field", ...) by FastAPI and as
    # ("field", ...) by pydantic itself
    parts = [str(part) for part in loc if part not in LOCATION_PREFIXES]
    return parts[0] if parts else "body"


def validation_error_from(errors: Iterable[Mapping[str, Any]]) -> ValidationError:
    """Build the application's ValidationError from pydantic error details."""
    missing: List[str] = []
    unknown: List[str] = []
    invalid: List[str] = []
    for error in errors:
        name = _field_name(error["loc"])
        if error["type"] == "missing":
            missing.append(name)
        elif error["type"] == "extra_forbidden":
            unknown.append(name)
        else:
            invalid.append(f"{name} ({error['msg']})")

    if missing:
        return ValidationError(f"Missing required field(s): {', '.join(missing)}", fields=missing)
    if unknown:
        return ValidationError(f"Unknown field(s): {', '.join(unknown)}", fields=unknown)
    return ValidationError(
        f"Invalid field(s): {'; '.join(invalid)}",
        fields=[item.split(" ", 1)[0] for item in invalid],
    )


def raise_validation_error(exc: pydantic.ValidationError) -> NoReturn:
    raise validation_error_from(exc.errors()) from exc


def validate_patch(schema: Type[BaseModel], payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate patch values against an all-optional schema, keeping only the keys sent."""
    try:
        model = schema.model_validate(dict(payload))
    except pydantic.ValidationError as exc:
        raise_validation_error(exc)
    # model_dump follows schema order; updatedFields must follow the request
    dumped = model.model_dump(exclude_unset=True)
    return {name: dumped[name] for name in payload if name in dumped}


def apply_partial_update(
    existing: Mapping[str, Any],
    patch_fields: Mapping[str, Any],
    allowed_fields: Optional[Iterable[str]] = None,
) -> PartialUpdate:
    """
    Merge patch_fields into a copy of existing.

    Fields absent from the patch are left untouched and present fields
    overwrite unconditionally, nested values included. Unknown names are
    rejected instead of being dropped, so a client typo never turns into a
    silent no-op. allowed_fields defaults to the keys of existing.
    """
    allowed = set(allowed_fields) if allowed_fields is not None else set(existing)

    unknown = [name for name in patch_fields if name not in allowed]
    if unknown:
        raise ValidationError(f"Unknown field(s): {', '.join(unknown)}", fields=unknown)

    changes = {name: value for name, value in patch_fields.items() if value is not UNSET}
    if not changes:
        raise BadRequestError("No valid fields provided for update")

    record = dict(existing)
    record.update(changes)
    return PartialUpdate(record=record, updated_fields=list(changes))


def apply_full_replacement(schema: Type[BaseModel], payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate a complete record for a PUT.

    Every required field of schema must be present; optional fields fall back
    to their defaults. The result depends on payload alone, so replaying the
    same PUT stores the same state.
    """
    try:
        model = schema.model_validate(dict(payload))
    except pydantic.ValidationError as exc:
        raise_validation_error(exc)
    return model.model_dump()
