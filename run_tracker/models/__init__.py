"""SQLAlchemy models."""

from run_tracker.models.run import Run
from run_tracker.models.user import User

__all__ = [
    "User",
    "Run",
]
