"""Repository for account operations."""

from typing import List

from components.account.models import Account
from components.core.repository import OwnedRepository


class AccountRepository(OwnedRepository[Account]):
    """Repository for account operations."""
    model = Account
    resource_name = "Account"
    conflict_message = "Account with this name already exists"

    async def list(self, skip: int = 0, limit: int = 100) -> List[Account]:
        return await self.find(skip=skip, limit=limit, order_by=(Account.name, Account.id))
