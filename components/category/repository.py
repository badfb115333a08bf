"""Repository for category operations."""

from typing import List, Optional

from components.category.models import Category
from components.core.repository import OwnedRepository


class CategoryRepository(OwnedRepository[Category]):
    """Repository for category operations."""
    model = Category
    resource_name = "Category"
    conflict_message = "Category with this name and type already exists"

    async def list(self, skip: int = 0, limit: int = 100, type: Optional[str] = None) -> List[Category]:
        filters = [Category.type == type] if type else []
        return await self.find(filters, skip=skip, limit=limit, order_by=(Category.name, Category.id))
