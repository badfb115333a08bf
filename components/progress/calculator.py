"""Budget and goal progress calculation.

Everything here is pure: the functions take a budget or goal record plus the
transactions visible to its owner and derive the progress figures. Records
can be ORM rows or any object exposing the same attributes.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, Optional, Tuple

PERIOD_MONTHLY = "monthly"
PERIOD_WEEKLY = "weekly"
PERIOD_YEARLY = "yearly"
PERIODS = (PERIOD_MONTHLY, PERIOD_WEEKLY, PERIOD_YEARLY)

TYPE_INCOME = "income"
TYPE_EXPENSE = "expense"
TYPE_TRANSFER = "transfer"

ONE_DECIMAL = Decimal("0.1")
HUNDRED = Decimal("100")


class ProgressError(ValueError):
    """Raised when a budget or goal cannot produce a meaningful percentage."""


@dataclass(frozen=True)
class BudgetProgress:
    amount: Decimal
    spent: Decimal
    remaining: Decimal
    percentage: Decimal
    period_start: date
    period_end: date
    transaction_count: int

    @property
    def is_over_budget(self) -> bool:
        return self.spent > self.amount


@dataclass(frozen=True)
class GoalProgress:
    target_amount: Decimal
    current_amount: Decimal
    percentage: Decimal

    @property
    def remaining(self) -> Decimal:
        return max(self.target_amount - self.current_amount, Decimal("0"))

    @property
    def display_percentage(self) -> Decimal:
        """Percentage clamped to [0, 100] for progress bars."""
        return min(max(self.percentage, Decimal("0")), HUNDRED)

    @property
    def is_completed(self) -> bool:
        return self.current_amount >= self.target_amount


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if value is None:
        return Decimal("0")
    # str() keeps floats like 125.5 from dragging binary noise along
    return Decimal(str(value))


def as_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    return value


def percentage_of(part: Decimal, whole: Decimal) -> Decimal:
    """part / whole * 100 rounded half-up to one decimal place."""
    return (part / whole * HUNDRED).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


def add_months(value: date, months: int) -> date:
    month_index = (value.year * 12 + value.month - 1) + months
    year = month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def budget_window(start_date: Any, period: str, end_date: Any = None) -> Tuple[date, date]:
    """
    Return the inclusive (start, end) date window of a budget.

    An explicit end_date wins. Otherwise the window spans one period from
    start_date: a calendar month, seven days or a calendar year.
    """
    start = as_date(start_date)
    if end_date is not None:
        return start, as_date(end_date)

    if period == PERIOD_MONTHLY:
        end = add_months(start, 1) - timedelta(days=1)
    elif period == PERIOD_WEEKLY:
        end = start + timedelta(days=6)
    elif period == PERIOD_YEARLY:
        end = add_months(start, 12) - timedelta(days=1)
    else:
        raise ProgressError(f"Unknown budget period: {period!r}")
    return start, end


def budget_matches(budget: Any, transaction: Any, window: Tuple[date, date]) -> bool:
    if transaction.type != TYPE_EXPENSE:
        return False
    tx_date = as_date(transaction.date)
    if not window[0] <= tx_date <= window[1]:
        return False
    category_id = getattr(budget, "category_id", None)
    return category_id is None or transaction.category_id == category_id


def compute_budget_progress(budget: Any, transactions: Iterable[Any]) -> BudgetProgress:
    """
    Aggregate expense transactions against a budget.

    Expenses count by absolute value so ledgers that store them as negative
    numbers and ledgers that store them as positive numbers agree. The
    percentage is left unclamped; overspend shows up as a value above 100
    and as a negative remaining amount.
    """
    amount = to_decimal(budget.amount)
    if amount <= 0:
        raise ProgressError(f"Budget amount must be positive, got {amount}")

    window = budget_window(budget.start_date, budget.period, getattr(budget, "end_date", None))

    spent = Decimal("0")
    count = 0
    for transaction in transactions:
        if budget_matches(budget, transaction, window):
            spent += abs(to_decimal(transaction.amount))
            count += 1

    return BudgetProgress(
        amount=amount,
        spent=spent,
        remaining=amount - spent,
        percentage=percentage_of(spent, amount),
        period_start=window[0],
        period_end=window[1],
        transaction_count=count,
    )


def ledger_balance(transactions: Iterable[Any]) -> Decimal:
    """Income minus expenses; transfers are neutral."""
    balance = Decimal("0")
    for transaction in transactions:
        value = abs(to_decimal(transaction.amount))
        if transaction.type == TYPE_INCOME:
            balance += value
        elif transaction.type == TYPE_EXPENSE:
            balance -= value
    return balance


def compute_goal_progress(goal: Any, transactions: Optional[Iterable[Any]] = None) -> GoalProgress:
    """
    Compute completion of a savings goal.

    The stored current_amount is used unless a transaction set is given, in
    which case the amount saved is derived from it. An amount above the
    target is kept as-is and yields a percentage above 100.
    """
    target = to_decimal(goal.target_amount)
    if target <= 0:
        raise ProgressError(f"Goal target_amount must be positive, got {target}")

    if transactions is None:
        current = to_decimal(goal.current_amount)
    else:
        current = ledger_balance(transactions)

    return GoalProgress(
        target_amount=target,
        current_amount=current,
        percentage=percentage_of(current, target),
    )
