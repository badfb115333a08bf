"""User model for the database."""

from sqlalchemy import Column, Integer, String, DateTime

from components.core.database import Base, utcnow


class User(Base):
    """User model representing an account holder in the system."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # Hashed password
    full_name = Column(String(100), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
