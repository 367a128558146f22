"""User model."""

from sqlalchemy import Column, Integer, String

from run_tracker.database import Base


class User(Base):
    """User model for authentication and run ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
