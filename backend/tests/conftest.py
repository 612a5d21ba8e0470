"""
Point the app at a throwaway SQLite file before any test module imports it,
with "today" pinned so analytics are deterministic.
"""
import os
import tempfile
from pathlib import Path

import pytest

_tmp = Path(tempfile.mkdtemp(prefix="liftlog-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_tmp / 'test.db'}"
os.environ["SEED_BASELINE"] = "false"
os.environ["TODAY"] = "2026-01-10"

from liftlog import models  # noqa: E402,F401
from liftlog.db import Base, SessionLocal, engine  # noqa: E402
from liftlog.repositories.session_repo import SessionRepository  # noqa: E402

Base.metadata.create_all(bind=engine)


@pytest.fixture(autouse=True)
def empty_store():
    with SessionLocal() as db:
        SessionRepository(db).save([])
    yield


@pytest.fixture
def db():
    with SessionLocal() as s:
        yield s
