"""Database initialization and dependency injection."""

from typing import AsyncGenerator, Optional

import fastapi
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.database import DatabaseManager
# Import all models to ensure they're registered
import components.user.models
import components.account.models
import components.category.models
import components.transaction.models
import components.budget.models
import components.goal.models


async def get_db(request: fastapi.Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for getting database sessions."""
    async with request.app.state.db_manager.get_db() as session:
        yield session


def init_db(app: fastapi.FastAPI, db_manager: Optional[DatabaseManager] = None) -> DatabaseManager:
    """Attach the database manager to the application."""
    app.state.db_manager = db_manager or DatabaseManager()
    return app.state.db_manager
