"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from run_tracker.config import Settings
from run_tracker.errors import InvalidCredentials, InvalidToken, MissingToken
from run_tracker.models.user import User
from run_tracker.repositories.users import UserRepository
from run_tracker.schemas.auth import TokenIdentity

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class AuthService:
    """Issues and verifies access tokens for seeded users."""

    def __init__(self, users: UserRepository, settings: Settings):
        self.users = users
        self.settings = settings

    def create_access_token(
        self, user_id: int, email: str, expires_delta: timedelta | None = None
    ) -> str:
        """Create a JWT access token."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.settings.jwt_expiration_minutes)
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "exp": datetime.now(UTC) + expires_delta,
        }
        return jwt.encode(
            to_encode, self.settings.jwt_secret, algorithm=self.settings.jwt_algorithm
        )

    def authenticate_user(self, email: str, password: str) -> User | None:
        """Authenticate a user by email and password."""
        user = self.users.get_by_email(email)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def login(self, email: str, password: str) -> tuple[str, User]:
        """Check credentials and issue a token for the matching user."""
        user = self.authenticate_user(email, password)
        if user is None:
            logger.warning("Failed login attempt for %s", email)
            raise InvalidCredentials()
        return self.create_access_token(user.id, user.email), user

    def verify(self, token: str | None) -> TokenIdentity:
        """Decode a token and return the identity it carries."""
        if not token:
            raise MissingToken()
        try:
            payload = jwt.decode(
                token, self.settings.jwt_secret, algorithms=[self.settings.jwt_algorithm]
            )
        except JWTError as e:
            raise InvalidToken() from e

        user_id = payload.get("sub")
        email = payload.get("email")
        if user_id is None or email is None:
            raise InvalidToken()
        try:
            return TokenIdentity(user_id=int(user_id), email=email)
        except ValueError as e:
            raise InvalidToken() from e

    def ensure_user(self, email: str, password: str) -> User:
        """Create a user unless one with this email already exists."""
        existing = self.users.get_by_email(email)
        if existing:
            return existing
        user = self.users.add(User(email=email, password_hash=get_password_hash(password)))
        logger.info("Seeded user %s (id=%s)", user.email, user.id)
        return user
