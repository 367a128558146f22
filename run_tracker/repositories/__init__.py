"""Storage backends for users and runs."""

from run_tracker.repositories.runs import InMemoryRunRepository, RunRepository, SqlRunRepository
from run_tracker.repositories.users import (
    InMemoryUserRepository,
    SqlUserRepository,
    UserRepository,
)

__all__ = [
    "RunRepository",
    "InMemoryRunRepository",
    "SqlRunRepository",
    "UserRepository",
    "InMemoryUserRepository",
    "SqlUserRepository",
]
