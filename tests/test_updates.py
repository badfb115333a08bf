from datetime import date
from decimal import Decimal

import pytest

from components.core.exceptions import BadRequestError, ValidationError
from components.core.updates import UNSET, apply_full_replacement, apply_partial_update, validate_patch
from components.transaction.schemas import TransactionCreate, TransactionUpdate


def existing_transaction():
    return {
        "amount": Decimal("-4.50"),
        "type": "expense",
        "date": date(2024, 1, 15),
        "description": "Coffee",
        "category_id": 3,
        "account_id": 1,
    }


def test_patch_changes_only_supplied_fields():
    existing = existing_transaction()
    result = apply_partial_update(existing, {"description": "Updated coffee purchase", "amount": Decimal("30.50")})

    assert result.updated_fields == ["description", "amount"]
    assert result.record["description"] == "Updated coffee purchase"
    assert result.record["amount"] == Decimal("30.50")
    for name in ("type", "date", "category_id", "account_id"):
        assert result.record[name] == existing[name]


def test_patch_does_not_mutate_input():
    existing = existing_transaction()
    apply_partial_update(existing, {"description": "Tea"})

    assert existing == existing_transaction()


def test_empty_patch_is_rejected():
    with pytest.raises(BadRequestError) as exc_info:
        apply_partial_update(existing_transaction(), {})

    assert exc_info.value.message == "No valid fields provided for update"


def test_patch_of_unset_values_is_rejected():
    with pytest.raises(BadRequestError):
        apply_partial_update(existing_transaction(), {"description": UNSET})


def test_unset_values_are_dropped():
    result = apply_partial_update(existing_transaction(), {"description": UNSET, "amount": Decimal("1")})

    assert result.updated_fields == ["amount"]
    assert result.record["description"] == "Coffee"


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError) as exc_info:
        apply_partial_update(existing_transaction(), {"descripton": "typo", "amount": Decimal("1")})

    assert exc_info.value.fields == ["descripton"]


def test_allowed_fields_override_existing_keys():
    with pytest.raises(ValidationError):
        apply_partial_update(existing_transaction(), {"amount": Decimal("1")}, allowed_fields=["description"])


def test_explicit_none_clears_field():
    result = apply_partial_update(existing_transaction(), {"category_id": None})

    assert result.record["category_id"] is None
    assert result.updated_fields == ["category_id"]


def test_nested_values_are_replaced_not_merged():
    existing = {"meta": {"a": 1, "b": 2}}
    result = apply_partial_update(existing, {"meta": {"a": 5}})

    assert result.record["meta"] == {"a": 5}


def test_validate_patch_keeps_only_sent_keys():
    patch = validate_patch(TransactionUpdate, {"amount": "30.50", "category_id": None})

    assert patch == {"amount": Decimal("30.50"), "category_id": None}


def test_validate_patch_rejects_unknown_keys():
    with pytest.raises(ValidationError) as exc_info:
        validate_patch(TransactionUpdate, {"colour": "red"})

    assert exc_info.value.fields == ["colour"]


def test_validate_patch_rejects_bad_values():
    with pytest.raises(ValidationError) as exc_info:
        validate_patch(TransactionUpdate, {"type": "gift"})

    assert exc_info.value.fields == ["type"]


def test_full_replacement_names_missing_fields():
    with pytest.raises(ValidationError) as exc_info:
        apply_full_replacement(TransactionCreate, {"description": "No amount"})

    assert set(exc_info.value.fields) == {"amount", "type", "date"}
    assert "amount" in exc_info.value.message


def test_full_replacement_applies_defaults():
    record = apply_full_replacement(TransactionCreate, {"amount": "12.00", "type": "income", "date": "2024-01-02"})

    assert record == {
        "amount": Decimal("12.00"),
        "type": "income",
        "date": date(2024, 1, 2),
        "description": None,
        "category_id": None,
        "account_id": None,
    }


def test_full_replacement_is_idempotent():
    payload = {"amount": "-9.99", "type": "expense", "date": "2024-01-02", "description": "Lunch"}

    assert apply_full_replacement(TransactionCreate, payload) == apply_full_replacement(TransactionCreate, payload)


def test_validate_patch_follows_request_order():
    patch = validate_patch(TransactionUpdate, {"description": "Lunch", "amount": "-12.00"})

    assert list(patch) == ["description", "amount"]
