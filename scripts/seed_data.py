"""Script to seed demo data into the database."""

import asyncio
import logging
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import delete

from components.account.models import Account
from components.budget.models import Budget
from components.category.models import Category
from components.core.config import get_settings
from components.core.database import DatabaseManager
from components.core.logger import configure_logging
from components.core.security import get_password_hash
from components.goal.models import Goal
from components.transaction.models import Transaction
from components.user.models import User

logger = logging.getLogger("components.seed_data")

DEMO_EMAIL = "demo@fintrack.local"
DEMO_PASSWORD = "password123"


async def seed_data(db_manager: DatabaseManager) -> None:
    """Seed a demo user with a month of activity."""
    await db_manager.create_tables()

    async with db_manager.get_db() as db:
        # Clear existing data
        for model in (Transaction, Budget, Goal, Category, Account, User):
            await db.execute(delete(model))
        await db.commit()

        user = User(
            email=DEMO_EMAIL,
            password=get_password_hash(DEMO_PASSWORD),
            full_name="Demo User",
        )
        db.add(user)
        await db.commit()

        checking = Account(user_id=user.id, name="Checking", type="checking", balance=Decimal("2500.00"))
        savings = Account(user_id=user.id, name="Savings", type="savings", balance=Decimal("8000.00"))
        salary = Category(user_id=user.id, name="Salary", type="income", color="#2E7D32")
        food = Category(user_id=user.id, name="Food", type="expense", color="#EF6C00", icon="utensils")
        rent = Category(user_id=user.id, name="Rent", type="expense", color="#1565C0", icon="home")
        db.add_all([checking, savings, salary, food, rent])
        await db.commit()

        month_start = date.today().replace(day=1)
        transactions = [
            Transaction(user_id=user.id, amount=Decimal("4200.00"), type="income", date=month_start,
                        description="Monthly salary", category_id=salary.id, account_id=checking.id),
            Transaction(user_id=user.id, amount=Decimal("-1500.00"), type="expense", date=month_start,
                        description="Rent", category_id=rent.id, account_id=checking.id),
            Transaction(user_id=user.id, amount=Decimal("-500.00"), type="transfer", date=month_start,
                        description="To savings", account_id=checking.id),
        ]
        for day in range(0, 21, 3):
            transactions.append(Transaction(
                user_id=user.id,
                amount=Decimal("-25.50") - day,
                type="expense",
                date=month_start + timedelta(days=day),
                description="Groceries",
                category_id=food.id,
                account_id=checking.id,
            ))
        db.add_all(transactions)

        db.add_all([
            Budget(user_id=user.id, name="Food", amount=Decimal("500.00"), period="monthly",
                   category_id=food.id, start_date=month_start),
            Budget(user_id=user.id, name="Everything", amount=Decimal("3000.00"), period="monthly",
                   start_date=month_start),
            Goal(user_id=user.id, name="Emergency fund", target_amount=Decimal("10000.00"),
                 current_amount=Decimal("8000.00"), target_date=month_start.replace(year=month_start.year + 1)),
        ])
        await db.commit()
        logger.info("Seeded demo user %s with %d transactions", DEMO_EMAIL, len(transactions))

    await db_manager.dispose()


if __name__ == "__main__":
    configure_logging(get_settings().LOG_LEVEL)
    asyncio.run(seed_data(DatabaseManager()))
