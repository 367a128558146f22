"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from run_tracker.config import Settings
from run_tracker.repositories.runs import RunRepository
from run_tracker.repositories.users import UserRepository
from run_tracker.schemas.auth import TokenIdentity
from run_tracker.services.auth import AuthService
from run_tracker.services.photo_storage import PhotoStorage
from run_tracker.services.run_service import RunService
from run_tracker.services.stats import StatsService

# Missing tokens are reported by AuthService.verify, not by HTTPBearer
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


def get_run_repository(request: Request) -> RunRepository:
    return request.app.state.run_repository


def get_photo_storage(request: Request) -> PhotoStorage:
    return request.app.state.photo_storage


def get_auth_service(
    users: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(users, settings)


def get_run_service(
    runs: Annotated[RunRepository, Depends(get_run_repository)],
    photos: Annotated[PhotoStorage, Depends(get_photo_storage)],
) -> RunService:
    """Get run service with dependencies."""
    return RunService(runs, photos)


def get_stats_service(
    runs: Annotated[RunRepository, Depends(get_run_repository)],
) -> StatsService:
    """Get stats service with dependencies."""
    return StatsService(runs)


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenIdentity:
    """Get the authenticated identity from the bearer token."""
    token = credentials.credentials if credentials else None
    return auth_service.verify(token)
