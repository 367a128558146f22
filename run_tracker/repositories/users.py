"""User repositories."""

from typing import Protocol

from sqlalchemy.orm import sessionmaker

from run_tracker.models.user import User


class UserRepository(Protocol):
    def get_by_email(self, email: str) -> User | None: ...

    def add(self, user: User) -> User: ...


class InMemoryUserRepository:
    """Users kept in a process-local dict keyed by id."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}

    def get_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def add(self, user: User) -> User:
        if self.get_by_email(user.email) is not None:
            raise ValueError(f"User {user.email} already exists")
        user.id = max(self._users, default=0) + 1
        self._users[user.id] = user
        return user


class SqlUserRepository:
    """Users stored through SQLAlchemy."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get_by_email(self, email: str) -> User | None:
        with self.session_factory() as session:
            return session.query(User).filter(User.email == email).first()

    def add(self, user: User) -> User:
        with self.session_factory() as session:
            session.add(user)
            session.commit()
            session.refresh(user)
            return user
