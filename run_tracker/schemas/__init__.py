"""Pydantic schemas for API requests and responses."""

from run_tracker.schemas.auth import (
    LoginResponse,
    MeResponse,
    TokenIdentity,
    UserLogin,
    UserResponse,
)
from run_tracker.schemas.run import (
    MessageResponse,
    RunEnvelope,
    RunListResponse,
    RunResponse,
)
from run_tracker.schemas.stats import RunStats, StatsResponse

__all__ = [
    "UserLogin",
    "UserResponse",
    "LoginResponse",
    "MeResponse",
    "TokenIdentity",
    "RunResponse",
    "RunEnvelope",
    "RunListResponse",
    "MessageResponse",
    "RunStats",
    "StatsResponse",
]
