"""Category model for the database."""

from sqlalchemy import Column, String, UniqueConstraint

from components.core.database import Base, OwnedMixin


class Category(OwnedMixin, Base):
    """Category model for grouping transactions and scoping budgets."""
    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("user_id", "name", "type", name="uq_categories_user_name_type"),)

    name = Column(String(100), nullable=False)
    type = Column(String(10), nullable=False, default="expense")
    color = Column(String(7), nullable=True)  # "#RRGGBB"
    icon = Column(String(50), nullable=True)
