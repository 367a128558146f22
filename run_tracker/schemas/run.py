"""Run schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RunResponse(BaseModel):
    """Run response, serialized with camelCase keys."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    user_id: int
    date: str
    distance: float
    time: int
    location: str
    pace: str
    photo: str | None
    created_at: datetime


class RunEnvelope(BaseModel):
    """Single run response."""

    success: bool = True
    run: RunResponse


class RunListResponse(BaseModel):
    """Run list response."""

    success: bool = True
    runs: list[RunResponse]


class MessageResponse(BaseModel):
    """Plain confirmation response."""

    success: bool = True
    message: str
