"""Budget model for the database."""

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from components.core.database import Base, OwnedMixin


class Budget(OwnedMixin, Base):
    """Spending limit over a period, optionally scoped to one category."""
    __tablename__ = "budgets"

    name = Column(String(100), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)  # Limit, always positive
    period = Column(String(10), nullable=False, default="monthly")
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)  # Derived from period when empty

    # Relationship with Category
    category = relationship("Category")
