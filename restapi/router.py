"""Application configuration and router setup."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import fastapi
from fastapi.middleware import cors
from fastapi.openapi.utils import get_openapi

from components.core import init_db
from components.core.config import get_settings
from components.core.database import DatabaseManager
from components.core.logger import configure_logging
from restapi.endpoints import accounts, auth, budgets, categories, goals, health_check, transactions
from restapi.errors import register_exception_handlers

logger = logging.getLogger(__name__)

TITLE = "FinTrack"
DESCRIPTION = "Personal finance API: transactions, accounts, categories, budgets and goals"
VERSION = "1.0.0"


def create_app(
    db_manager: Optional[DatabaseManager] = None,
    create_tables: Optional[bool] = None,
) -> fastapi.FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    if create_tables is None:
        create_tables = settings.DB_CREATE_TABLES

    @asynccontextmanager
    async def lifespan(app: fastapi.FastAPI):
        if create_tables:
            await app.state.db_manager.create_tables()
            logger.info("Database tables created")
        yield
        await app.state.db_manager.dispose()

    app = fastapi.FastAPI(
        title=TITLE,
        description=DESCRIPTION,
        version=VERSION,
        lifespan=lifespan,
    )

    # Initialize database
    init_db.init_db(app, db_manager)

    # Add CORS middleware
    app.add_middleware(
        cors.CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health_check.router)
    for endpoint in (auth, transactions, accounts, categories, budgets, goals):
        app.include_router(endpoint.router, prefix=settings.api_prefix)

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        openapi_schema = get_openapi(
            title=TITLE,
            version=VERSION,
            description=DESCRIPTION,
            routes=app.routes,
        )
        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi

    return app
