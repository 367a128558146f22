"""Aggregate statistics over a user's runs."""

from run_tracker.repositories.runs import RunRepository
from run_tracker.schemas.stats import RunStats


class StatsService:
    def __init__(self, runs: RunRepository):
        self.runs = runs

    def compute(self, owner_id: int) -> RunStats:
        """Count, total distance (1 decimal) and mean pace (2 decimals)."""
        runs = self.runs.list_for_owner(owner_id)
        if not runs:
            return RunStats()

        total_distance = sum(run.distance for run in runs)
        average_pace = sum(float(run.pace) for run in runs) / len(runs)
        return RunStats(
            total_runs=len(runs),
            total_distance=round(total_distance, 1),
            average_pace=round(average_pace, 2),
        )
