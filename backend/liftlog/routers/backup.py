import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from liftlog.core.records import Profile, TrainingState, coerce_state
from liftlog.deps.store import get_profile, get_repo, get_state
from liftlog.repositories.session_repo import SessionRepository
from liftlog.schemas.backup import ImportResult, StateDocument

log = logging.getLogger(__name__)

router = APIRouter(tags=["backup"])

@router.get("/export", response_model=StateDocument)
def export_state(state: TrainingState = Depends(get_state)):
    """Whole log as one JSON document; feed it back to /import to restore."""
    return StateDocument.from_state(state)

@router.post("/import", response_model=ImportResult)
def import_state(
    document: Any = Body(...),
    repo: SessionRepository = Depends(get_repo),
    profile: Profile = Depends(get_profile),
):
    # malformed parts are normalized away, never rejected
    state = coerce_state(document, profile=profile)
    count = repo.save(state.sessions)
    log.info("imported %d sessions", count)
    return ImportResult(sessions=count)
