# liftlog/deps/store.py
from datetime import date
from fastapi import Depends
from sqlalchemy.orm import Session

from liftlog.core.catalog import DEFAULT_CATALOG, Catalog
from liftlog.core.records import Profile, TrainingState
from liftlog.db import get_db
from liftlog.repositories.session_repo import SessionRepository
from liftlog.settings import get_settings

def get_catalog() -> Catalog:
    return DEFAULT_CATALOG

def get_today() -> date:
    return get_settings().today()

def get_profile() -> Profile:
    s = get_settings()
    return Profile(name=s.PROFILE_NAME, device=s.PROFILE_DEVICE)

def get_repo(db: Session = Depends(get_db)) -> SessionRepository:
    return SessionRepository(db)

def get_state(
    repo: SessionRepository = Depends(get_repo),
    profile: Profile = Depends(get_profile),
) -> TrainingState:
    """Fresh snapshot of the whole log for this request."""
    return TrainingState(profile=profile, sessions=repo.load())
