#!/usr/bin/env python3
"""Seed demo data into the SQL database.

Creates the configured seed user and the sample runs so a server started with
``STORAGE_BACKEND=database`` has something to show.

Usage:
    DATABASE_URL=sqlite:///./run_tracker.db python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from run_tracker.config import get_settings
from run_tracker.database import create_db_engine, create_session_factory, init_db
from run_tracker.repositories import SqlRunRepository, SqlUserRepository
from run_tracker.services.auth import AuthService
from run_tracker.services.photo_storage import PhotoStorage
from run_tracker.services.run_service import RunService


def seed_demo_data():
    """Seed the database with the demo user and runs."""
    settings = get_settings()
    engine = create_db_engine(settings.database_url)
    init_db(engine)
    session_factory = create_session_factory(engine)

    user = AuthService(SqlUserRepository(session_factory), settings).ensure_user(
        settings.seed_user_email, settings.seed_user_password
    )
    photos = PhotoStorage(settings.upload_dir, settings.upload_url_prefix)
    created = RunService(SqlRunRepository(session_factory), photos).seed_demo_runs(user.id)

    print(f"Database: {settings.database_url}")
    print(f"User: {user.email} / {settings.seed_user_password}")
    print(f"Runs created: {len(created)}")
    engine.dispose()


if __name__ == "__main__":
    seed_demo_data()
