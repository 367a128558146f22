"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from run_tracker.api.dependencies import get_auth_service, get_current_identity
from run_tracker.schemas.auth import (
    LoginResponse,
    MeResponse,
    TokenIdentity,
    UserLogin,
    UserResponse,
)
from run_tracker.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    token, user = auth_service.login(credentials.email, credentials.password)
    return LoginResponse(token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=MeResponse)
def get_me(
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
):
    """Get current user information from the token."""
    return MeResponse(user=UserResponse(id=identity.user_id, email=identity.email))
