"""Run API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from run_tracker.api.dependencies import get_current_identity, get_photo_storage, get_run_service
from run_tracker.schemas.auth import TokenIdentity
from run_tracker.schemas.run import MessageResponse, RunEnvelope, RunListResponse, RunResponse
from run_tracker.services.photo_storage import PhotoStorage, PhotoUpload
from run_tracker.services.run_service import RunService

router = APIRouter(prefix="/runs", tags=["runs"])


@router.get("", response_model=RunListResponse)
def list_runs(
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    run_service: Annotated[RunService, Depends(get_run_service)],
):
    """Get all runs of the current user, most recent first."""
    runs = run_service.list_runs(identity.user_id)
    return RunListResponse(runs=[RunResponse.model_validate(run) for run in runs])


@router.post("", response_model=RunEnvelope, status_code=status.HTTP_201_CREATED)
async def create_run(
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    run_service: Annotated[RunService, Depends(get_run_service)],
    photos: Annotated[PhotoStorage, Depends(get_photo_storage)],
    distance: Annotated[str | None, Form()] = None,
    time: Annotated[str | None, Form()] = None,
    location: Annotated[str | None, Form()] = None,
    photo: Annotated[UploadFile | None, File(description="Run photo (any image type)")] = None,
):
    """Record a new run from multipart form data.

    Note: This endpoint must remain async because UploadFile.read() is async.
    """
    upload = None
    if photo is not None and photo.filename:
        # One byte past the cap is enough to tell the file is too large
        content = await photo.read(photos.max_bytes + 1)
        upload = PhotoUpload(
            filename=photo.filename, content_type=photo.content_type, content=content
        )

    run = run_service.create(identity.user_id, distance, time, location, photo=upload)
    return RunEnvelope(run=RunResponse.model_validate(run))


@router.get("/{run_id}", response_model=RunEnvelope)
def get_run(
    run_id: str,
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    run_service: Annotated[RunService, Depends(get_run_service)],
):
    """Get a single run owned by the current user."""
    run = run_service.get(identity.user_id, run_id)
    return RunEnvelope(run=RunResponse.model_validate(run))


@router.delete("/{run_id}", response_model=MessageResponse)
def delete_run(
    run_id: str,
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    run_service: Annotated[RunService, Depends(get_run_service)],
):
    """Delete a run and its photo."""
    run_service.delete(identity.user_id, run_id)
    return MessageResponse(message="Run deleted")
