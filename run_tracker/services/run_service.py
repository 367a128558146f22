"""Run service: creation, lookup and deletion of a user's runs."""

import logging
import math
from datetime import UTC, datetime

from run_tracker.errors import NotFound, ValidationError
from run_tracker.models.run import Run
from run_tracker.repositories.runs import RunRepository
from run_tracker.services.photo_storage import PhotoStorage, PhotoUpload

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Distance, time and location are required"
POSITIVE_NUMBERS_MESSAGE = "Distance and time must be positive numbers"

DEMO_RUNS = [
    {
        "distance": 5.2,
        "time": 28,
        "location": "Shymkent",
        "created_at": datetime(2024, 7, 15, tzinfo=UTC),
    },
    {
        "distance": 3.5,
        "time": 20,
        "location": "Astana",
        "created_at": datetime(2024, 7, 18, tzinfo=UTC),
    },
]


def compute_pace(time: int, distance: float) -> str:
    """Minutes per kilometre, formatted with two decimals."""
    return f"{time / distance:.2f}"


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_distance(value: str | float | int) -> float:
    try:
        distance = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(POSITIVE_NUMBERS_MESSAGE) from e
    if not math.isfinite(distance) or distance <= 0:
        raise ValidationError(POSITIVE_NUMBERS_MESSAGE)
    return distance


def parse_time(value: str | float | int) -> int:
    """Parse whole minutes; fractional values are rejected."""
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(POSITIVE_NUMBERS_MESSAGE)
        value = int(value)
    try:
        minutes = int(str(value).strip())
    except ValueError as e:
        raise ValidationError(POSITIVE_NUMBERS_MESSAGE) from e
    if minutes <= 0:
        raise ValidationError(POSITIVE_NUMBERS_MESSAGE)
    return minutes


def parse_run_id(value: int | str) -> int:
    if isinstance(value, int):
        return value
    try:
        return int(value.strip())
    except ValueError as e:
        raise NotFound("Run not found") from e


class RunService:
    """Service for run-related operations, scoped to the owning user."""

    def __init__(self, runs: RunRepository, photos: PhotoStorage):
        self.runs = runs
        self.photos = photos

    def create(
        self,
        owner_id: int,
        distance: str | float | int | None,
        time: str | float | int | None,
        location: str | None,
        photo: PhotoUpload | None = None,
        created_at: datetime | None = None,
    ) -> Run:
        """Validate input, store the photo if any, and record a new run.

        Nothing is kept when any step fails: a photo saved before the run
        could be stored is removed again.
        """
        if _is_blank(distance) or _is_blank(time) or _is_blank(location):
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        distance_km = parse_distance(distance)
        minutes = parse_time(time)
        if photo is not None:
            self.photos.validate(photo)

        created_at = created_at or datetime.now(UTC)
        photo_ref = self.photos.save(photo) if photo is not None else None

        run = Run(
            user_id=owner_id,
            date=created_at.strftime("%d.%m.%Y"),
            distance=distance_km,
            time=minutes,
            location=location.strip(),
            pace=compute_pace(minutes, distance_km),
            photo=photo_ref,
            created_at=created_at,
        )
        try:
            run = self.runs.add(run)
        except Exception:
            if photo_ref:
                self.photos.delete(photo_ref)
            raise

        logger.info(
            "User %s created run %s (%.2f km, %d min)", owner_id, run.id, distance_km, minutes
        )
        return run

    def list_runs(self, owner_id: int) -> list[Run]:
        """All of the owner's runs, most recent first."""
        return self.runs.list_for_owner(owner_id)

    def get(self, owner_id: int, run_id: int | str) -> Run:
        """An owned run; ids that are not integers match nothing."""
        run = self.runs.get_for_owner(owner_id, parse_run_id(run_id))
        if run is None:
            raise NotFound("Run not found")
        return run

    def delete(self, owner_id: int, run_id: int | str) -> None:
        """Delete an owned run, then its photo."""
        run = self.get(owner_id, run_id)
        self.runs.remove(run)
        if run.photo:
            self.photos.delete(run.photo)
        logger.info("User %s deleted run %s", owner_id, run.id)

    def seed_demo_runs(self, owner_id: int) -> list[Run]:
        """Give a user the sample runs shown on a fresh install."""
        if self.runs.list_for_owner(owner_id):
            return []
        return [self.create(owner_id, **demo) for demo in DEMO_RUNS]
