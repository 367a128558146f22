"""Stats schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RunStats(BaseModel):
    """Aggregate figures over a user's runs."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_runs: int = 0
    total_distance: float = 0
    average_pace: float = 0


class StatsResponse(BaseModel):
    """Stats response."""

    success: bool = True
    stats: RunStats
