"""Repository for goal operations."""

from typing import List

from components.core.repository import OwnedRepository
from components.goal.models import Goal
from components.progress.calculator import GoalProgress, compute_goal_progress


class GoalRepository(OwnedRepository[Goal]):
    """Repository for goal operations."""
    model = Goal
    resource_name = "Goal"

    async def list(self, skip: int = 0, limit: int = 100) -> List[Goal]:
        return await self.find(skip=skip, limit=limit, order_by=(Goal.target_date, Goal.id))

    def progress(self, goal: Goal) -> GoalProgress:
        return compute_goal_progress(goal)
