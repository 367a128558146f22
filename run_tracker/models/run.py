"""Run model."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String

from run_tracker.database import Base, UTCDateTime


class Run(Base):
    """A single recorded run.

    ``pace`` is derived from ``time`` and ``distance`` when the run is created
    and is never edited on its own. Runs have no update path.
    """

    __tablename__ = "runs"
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(String(10), nullable=False)
    distance = Column(Float, nullable=False)
    time = Column(Integer, nullable=False)
    location = Column(String(255), nullable=False)
    pace = Column(String(16), nullable=False)
    photo = Column(String(512), nullable=True)
    created_at = Column(UTCDateTime, nullable=False, index=True)
