"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str


class LoginResponse(BaseModel):
    """Login response with token and user info."""

    success: bool = True
    token: str
    user: UserResponse


class TokenIdentity(BaseModel):
    """Identity embedded in a verified access token."""

    user_id: int
    email: str


class MeResponse(BaseModel):
    """Current user response."""

    success: bool = True
    user: UserResponse
