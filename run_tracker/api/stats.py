"""Stats API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from run_tracker.api.dependencies import get_current_identity, get_stats_service
from run_tracker.schemas.auth import TokenIdentity
from run_tracker.schemas.stats import StatsResponse
from run_tracker.services.stats import StatsService

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
def get_stats(
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    stats_service: Annotated[StatsService, Depends(get_stats_service)],
):
    """Get run count, total distance and average pace for the current user."""
    return StatsResponse(stats=stats_service.compute(identity.user_id))
