"""Repository for transaction operations."""

import logging
from datetime import date
from typing import Any, BinaryIO, Dict, List, Mapping, Optional, Tuple

import pandas as pd
import pydantic
from sqlalchemy import select

from components.account.models import Account
from components.budget.models import Budget
from components.category.models import Category
from components.core.exceptions import NotFoundError
from components.core.repository import OwnedRepository
from components.progress.calculator import TYPE_EXPENSE, budget_window
from components.transaction.models import Transaction
from components.transaction.schemas import TransactionCreate

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("date", "amount", "type")
IMPORT_COLUMNS = REQUIRED_COLUMNS + ("description", "category_id", "account_id")


def _cell(value: Any) -> str:
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()


class TransactionRepository(OwnedRepository[Transaction]):
    """Repository for transaction operations."""
    model = Transaction
    resource_name = "Transaction"

    async def find_filtered(
        self,
        skip: int = 0,
        limit: Optional[int] = 100,
        category_id: Optional[int] = None,
        account_id: Optional[int] = None,
        type: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Transaction]:
        """Get transactions with optional filtering; the date range is inclusive."""
        filters = []
        if category_id is not None:
            filters.append(Transaction.category_id == category_id)
        if account_id is not None:
            filters.append(Transaction.account_id == account_id)
        if type:
            filters.append(Transaction.type == type)
        if start_date:
            filters.append(Transaction.date >= start_date)
        if end_date:
            filters.append(Transaction.date <= end_date)

        return await self.find(
            filters,
            skip=skip,
            limit=limit,
            order_by=(Transaction.date.desc(), Transaction.id.desc()),
        )

    async def for_budget(self, budget: Budget) -> List[Transaction]:
        """Get the expense transactions falling inside a budget's window."""
        start, end = budget_window(budget.start_date, budget.period, budget.end_date)
        return await self.find_filtered(
            limit=None,
            category_id=budget.category_id,
            type=TYPE_EXPENSE,
            start_date=start,
            end_date=end,
        )

    async def check_references(self, values: Mapping[str, Any]) -> None:
        """Referenced category and account must belong to the same user."""
        for field, model, name in (
            ("category_id", Category, "Category"),
            ("account_id", Account, "Account"),
        ):
            ref_id = values.get(field)
            if ref_id is None:
                continue
            result = await self.session.execute(
                select(model.id).where(model.id == ref_id, model.user_id == self.owner_id)
            )
            if result.scalar_one_or_none() is None:
                raise NotFoundError(f"{name} not found")

    async def insert(self, values: Mapping[str, Any]) -> Transaction:
        await self.check_references(values)
        return await super().insert(values)

    async def update(self, record_id: int, values: Mapping[str, Any]) -> Transaction:
        await self.check_references(values)
        return await super().update(record_id, values)

    async def import_csv(self, file_content: BinaryIO) -> Tuple[bool, str, List[Dict], int]:
        """
        Import transactions from a CSV file.

        Args:
            file_content: The CSV file content

        Returns:
            Tuple containing:
            - Success status (bool)
            - Message (str)
            - List of errors if any (List[Dict])
            - Number of imported transactions (int)

        Every row is validated before anything is written; a single bad row
        rejects the whole file.
        """
        try:
            df = pd.read_csv(file_content, dtype=str, keep_default_na=False)
        except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as exc:
            return False, f"Unable to read CSV: {exc}", [], 0

        df.columns = [str(column).strip().lower() for column in df.columns]
        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            return False, f"CSV file must contain {', '.join(repr(c) for c in REQUIRED_COLUMNS)} columns", [], 0

        errors = []
        rows = []
        # Start at 2 to account for header row
        for row_num, record in enumerate(df.to_dict(orient="records"), start=2):
            cells = {column: _cell(record.get(column)) for column in IMPORT_COLUMNS}
            raw = {column: value for column, value in cells.items() if value}
            try:
                values = TransactionCreate.model_validate(raw).model_dump()
            except pydantic.ValidationError as exc:
                problems = "; ".join(
                    f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                    for error in exc.errors()
                )
                errors.append({"row": row_num, "message": problems})
                continue

            try:
                await self.check_references(values)
            except NotFoundError as exc:
                errors.append({"row": row_num, "message": exc.message})
                continue
            rows.append(values)

        if errors:
            logger.info("Rejected CSV import for user=%s: %d bad rows", self.owner_id, len(errors))
            return False, "Validation errors occurred", errors, 0
        if not rows:
            return False, "CSV file contains no transactions", [], 0

        for values in rows:
            self.session.add(Transaction(**values, user_id=self.owner_id))
        await self._commit()
        logger.info("Imported %d transactions for user=%s", len(rows), self.owner_id)
        return True, f"{len(rows)} transactions imported successfully", [], len(rows)
