"""Transaction model for the database."""

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from components.core.database import Base, OwnedMixin


class Transaction(OwnedMixin, Base):
    """A single ledger entry: income, expense or transfer."""
    __tablename__ = "transactions"

    amount = Column(Numeric(12, 2), nullable=False)  # Signed
    type = Column(String(10), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    description = Column(String(255), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True, index=True)

    # Relationships
    category = relationship("Category")
    account = relationship("Account")
