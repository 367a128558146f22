"""Run repositories.

Both implementations return a user's runs newest first and never hand out the
id of a deleted run again.
"""

from typing import Protocol

from sqlalchemy.orm import sessionmaker

from run_tracker.models.run import Run


class RunRepository(Protocol):
    def add(self, run: Run) -> Run: ...

    def list_for_owner(self, owner_id: int) -> list[Run]: ...

    def get_for_owner(self, owner_id: int, run_id: int) -> Run | None: ...

    def remove(self, run: Run) -> None: ...


class InMemoryRunRepository:
    """Runs kept in a process-local list."""

    def __init__(self) -> None:
        self._runs: list[Run] = []
        self._last_id = 0

    def add(self, run: Run) -> Run:
        self._last_id = max([self._last_id, *(r.id for r in self._runs)]) + 1
        run.id = self._last_id
        self._runs.append(run)
        return run

    def list_for_owner(self, owner_id: int) -> list[Run]:
        owned = [run for run in self._runs if run.user_id == owner_id]
        return sorted(owned, key=lambda run: (run.created_at, run.id), reverse=True)

    def get_for_owner(self, owner_id: int, run_id: int) -> Run | None:
        for run in self._runs:
            if run.id == run_id and run.user_id == owner_id:
                return run
        return None

    def remove(self, run: Run) -> None:
        self._runs = [r for r in self._runs if r.id != run.id]


class SqlRunRepository:
    """Runs stored through SQLAlchemy."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def add(self, run: Run) -> Run:
        with self.session_factory() as session:
            session.add(run)
            session.commit()
            session.refresh(run)
            return run

    def list_for_owner(self, owner_id: int) -> list[Run]:
        with self.session_factory() as session:
            return (
                session.query(Run)
                .filter(Run.user_id == owner_id)
                .order_by(Run.created_at.desc(), Run.id.desc())
                .all()
            )

    def get_for_owner(self, owner_id: int, run_id: int) -> Run | None:
        with self.session_factory() as session:
            return session.query(Run).filter(Run.id == run_id, Run.user_id == owner_id).first()

    def remove(self, run: Run) -> None:
        with self.session_factory() as session:
            session.query(Run).filter(Run.id == run.id).delete()
            session.commit()
