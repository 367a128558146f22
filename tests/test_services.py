"""Unit tests for the run, stats and auth services."""

from datetime import UTC, datetime, timedelta

import pytest

from run_tracker.errors import (
    InvalidCredentials,
    InvalidToken,
    MissingToken,
    NotFound,
    UnsupportedFileType,
    ValidationError,
)
from run_tracker.repositories import InMemoryRunRepository, InMemoryUserRepository
from run_tracker.services.auth import AuthService
from run_tracker.services.photo_storage import PhotoStorage, PhotoUpload
from run_tracker.services.run_service import RunService, compute_pace
from run_tracker.services.stats import StatsService


@pytest.fixture
def runs():
    return InMemoryRunRepository()


@pytest.fixture
def photos(tmp_path):
    return PhotoStorage(tmp_path / "uploads", max_bytes=1024)


@pytest.fixture
def run_service(runs, photos):
    return RunService(runs, photos)


@pytest.fixture
def auth_service(settings):
    service = AuthService(InMemoryUserRepository(), settings)
    service.ensure_user("runner@example.com", "secret-pass")
    return service


@pytest.mark.parametrize(
    ("distance", "time", "expected"),
    [(5, 25, "5.00"), (5.2, 28, "5.38"), (3.5, 20, "5.71"), (42.195, 180, "4.27"), (1, 7, "7.00")],
)
def test_compute_pace(distance, time, expected):
    """Test pace is minutes per kilometre with two decimals."""
    assert compute_pace(time, distance) == expected
    assert compute_pace(time, distance) == f"{round(time / distance, 2):.2f}"


def test_create_accepts_numbers_and_strings(run_service):
    """Test that form strings and plain numbers are both accepted."""
    from_form = run_service.create(1, "5.5", "30", "Lake")
    from_code = run_service.create(1, 5.5, 30.0, "Lake")
    assert from_form.distance == from_code.distance == 5.5
    assert from_form.time == from_code.time == 30
    assert from_form.pace == from_code.pace == "5.45"


def test_create_rejects_infinite_distance(run_service):
    with pytest.raises(ValidationError):
        run_service.create(1, "inf", "30", "Lake")


def test_create_sets_display_date(run_service):
    created_at = datetime(2024, 1, 2, 7, 30, tzinfo=UTC)
    run = run_service.create(1, 5, 25, "Park", created_at=created_at)
    assert run.date == "02.01.2024"


def test_get_and_delete_foreign_run(run_service, runs):
    """Test that another owner's run raises NotFound and stays stored."""
    run = run_service.create(1, 5, 25, "Park")

    with pytest.raises(NotFound):
        run_service.get(2, run.id)
    with pytest.raises(NotFound):
        run_service.delete(2, run.id)

    assert runs.list_for_owner(1) == [run]


def test_delete_missing_run_leaves_store_unchanged(run_service, runs):
    run = run_service.create(1, 5, 25, "Park")
    with pytest.raises(NotFound):
        run_service.delete(1, run.id + 1)
    assert runs.list_for_owner(1) == [run]


def test_invalid_photo_is_rejected_before_saving(run_service, photos):
    upload = PhotoUpload(filename="doc.pdf", content_type="application/pdf", content=b"%PDF")
    with pytest.raises(UnsupportedFileType):
        run_service.create(1, 5, 25, "Park", photo=upload)
    assert not photos.upload_dir.exists() or list(photos.upload_dir.iterdir()) == []


def test_photo_removed_when_run_cannot_be_stored(photos):
    """Test that a failed insert leaves no orphaned photo behind."""

    class FailingRepository(InMemoryRunRepository):
        def add(self, run):
            raise RuntimeError("disk full")

    service = RunService(FailingRepository(), photos)
    upload = PhotoUpload(filename="a.png", content_type="image/png", content=b"png")

    with pytest.raises(RuntimeError):
        service.create(1, 5, 25, "Park", photo=upload)
    assert list(photos.upload_dir.iterdir()) == []


def test_photo_delete_ignores_path_components(photos, tmp_path):
    """Test that references cannot point outside the upload directory."""
    outside = tmp_path / "keep.txt"
    outside.write_text("keep")
    assert photos.delete("/uploads/../keep.txt") is False
    assert outside.exists()


def test_stats_compute(run_service, runs):
    stats = StatsService(runs)
    assert stats.compute(1).model_dump() == {
        "total_runs": 0,
        "total_distance": 0,
        "average_pace": 0,
    }

    run_service.create(1, 5.2, 26, "Shymkent")  # pace 5.00
    run_service.create(1, 3.5, 21, "Astana")  # pace 6.00
    run_service.create(2, 10, 50, "Elsewhere")

    result = stats.compute(1)
    assert result.total_runs == 2
    assert result.total_distance == 8.7
    assert result.average_pace == 5.5


def test_login_and_verify(auth_service):
    token, user = auth_service.login("runner@example.com", "secret-pass")
    identity = auth_service.verify(token)
    assert identity.user_id == user.id
    assert identity.email == "runner@example.com"


def test_login_failures(auth_service):
    with pytest.raises(InvalidCredentials):
        auth_service.login("runner@example.com", "wrong")
    with pytest.raises(InvalidCredentials):
        auth_service.login("ghost@example.com", "secret-pass")


def test_verify_failures(auth_service):
    with pytest.raises(MissingToken):
        auth_service.verify(None)
    with pytest.raises(MissingToken):
        auth_service.verify("")
    with pytest.raises(InvalidToken):
        auth_service.verify("a.b.c")

    expired = auth_service.create_access_token(1, "runner@example.com", timedelta(minutes=-5))
    with pytest.raises(InvalidToken):
        auth_service.verify(expired)


def test_token_expires_after_configured_window(auth_service, settings):
    from jose import jwt

    token = auth_service.create_access_token(1, "runner@example.com")
    claims = jwt.get_unverified_claims(token)
    lifetime = claims["exp"] - datetime.now(UTC).timestamp()
    window = settings.jwt_expiration_minutes * 60
    assert window - 5 < lifetime <= window


def test_ensure_user_is_idempotent(auth_service):
    first = auth_service.ensure_user("runner@example.com", "another")
    second = auth_service.ensure_user("runner@example.com", "another")
    assert first is second
    # The first password still works
    auth_service.login("runner@example.com", "secret-pass")


def test_non_integer_run_id_raises_not_found(run_service):
    run = run_service.create(1, 5, 25, "Park")
    assert run_service.get(1, str(run.id)) is run
    with pytest.raises(NotFound):
        run_service.get(1, "abc")
    with pytest.raises(NotFound):
        run_service.delete(1, "")


def test_photo_kept_when_run_cannot_be_removed(photos):
    """Test that the photo is only deleted once the run record is gone."""

    class StuckRepository(InMemoryRunRepository):
        def remove(self, run):
            raise RuntimeError("database locked")

    service = RunService(StuckRepository(), photos)
    upload = PhotoUpload(filename="a.png", content_type="image/png", content=b"png")
    run = service.create(1, 5, 25, "Park", photo=upload)

    with pytest.raises(RuntimeError):
        service.delete(1, run.id)
    assert photos.path_for(run.photo).read_bytes() == b"png"
    assert service.get(1, run.id) is run
