"""Repository for budget operations."""

from typing import Any, List, Mapping

from sqlalchemy import select

from components.budget.models import Budget
from components.category.models import Category
from components.core.exceptions import NotFoundError
from components.core.repository import OwnedRepository
from components.progress.calculator import BudgetProgress, compute_budget_progress
from components.transaction.repository import TransactionRepository


class BudgetRepository(OwnedRepository[Budget]):
    """Repository for budget operations."""
    model = Budget
    resource_name = "Budget"

    async def list(self, skip: int = 0, limit: int = 100) -> List[Budget]:
        return await self.find(skip=skip, limit=limit, order_by=(Budget.start_date.desc(), Budget.id))

    async def check_category(self, values: Mapping[str, Any]) -> None:
        category_id = values.get("category_id")
        if category_id is None:
            return
        result = await self.session.execute(
            select(Category.id).where(Category.id == category_id, Category.user_id == self.owner_id)
        )
        if result.scalar_one_or_none() is None:
            raise NotFoundError("Category not found")

    async def insert(self, values: Mapping[str, Any]) -> Budget:
        await self.check_category(values)
        return await super().insert(values)

    async def update(self, record_id: int, values: Mapping[str, Any]) -> Budget:
        await self.check_category(values)
        return await super().update(record_id, values)

    async def progress(self, budget: Budget) -> BudgetProgress:
        """Recompute spent/remaining/percentage from the current ledger."""
        transactions = await TransactionRepository(self.session, self.owner_id).for_budget(budget)
        return compute_budget_progress(budget, transactions)
