"""Goal model for the database."""

from sqlalchemy import Column, Date, Numeric, String

from components.core.database import Base, OwnedMixin


class Goal(OwnedMixin, Base):
    """Savings target tracked against a manually maintained amount."""
    __tablename__ = "goals"

    name = Column(String(100), nullable=False)
    target_amount = Column(Numeric(12, 2), nullable=False)
    current_amount = Column(Numeric(12, 2), nullable=False, default=0)  # May exceed target
    target_date = Column(Date, nullable=True)
    description = Column(String(255), nullable=True)
