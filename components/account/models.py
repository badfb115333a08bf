"""Account model for the database."""

from sqlalchemy import Boolean, Column, Numeric, String, UniqueConstraint

from components.core.database import Base, OwnedMixin


class Account(OwnedMixin, Base):
    """A place money is held: bank account, card, wallet."""
    __tablename__ = "accounts"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_accounts_user_name"),)

    name = Column(String(100), nullable=False)
    type = Column(String(20), nullable=False, default="checking")
    balance = Column(Numeric(12, 2), nullable=False, default=0)
    currency = Column(String(3), nullable=False, default="USD")
    is_active = Column(Boolean, nullable=False, default=True)
