from fastapi import APIRouter, Depends, Response, status

from liftlog.core.catalog import Catalog
from liftlog.core.logbook import save_session
from liftlog.core.numeric import format_num, format_weight
from liftlog.core.records import Session, TrainingState, sort_sessions_desc
from liftlog.deps.store import get_catalog, get_repo, get_state, get_today
from liftlog.repositories.session_repo import SessionRepository
from liftlog.schemas.session import SaveResultRead, SessionCreate, SessionRead

router = APIRouter(prefix="/sessions", tags=["sessions"])

def set_lines(session: Session, catalog: Catalog) -> dict[str, list[str]]:
    lines = {}
    for ex_id, entry in session.items.items():
        ex = catalog.get(ex_id)
        unit = ex.unit.value if ex else ""
        lines[ex_id] = [
            f"S{i}: {format_weight(s.weight, unit)} × {format_num(s.reps)} "
            f"@RIR {'—' if s.rir is None else format_num(s.rir)}"
            for i, s in enumerate(entry.sets, start=1)
        ]
    return lines

def to_session_read(session: Session, catalog: Catalog) -> SessionRead:
    return SessionRead.model_validate(session).model_copy(update={
        "day_label": catalog.day_label(session.day_key),
        "lines": set_lines(session, catalog),
    })

@router.get("", response_model=list[SessionRead])
def list_history(
    state: TrainingState = Depends(get_state),
    catalog: Catalog = Depends(get_catalog),
):
    return [to_session_read(s, catalog) for s in sort_sessions_desc(state.sessions)]

@router.post("", response_model=SaveResultRead, status_code=status.HTTP_201_CREATED)
def log_session(
    payload: SessionCreate,
    response: Response,
    state: TrainingState = Depends(get_state),
    repo: SessionRepository = Depends(get_repo),
    catalog: Catalog = Depends(get_catalog),
    today=Depends(get_today),
):
    result = save_session(state, payload.model_dump(mode="json"), catalog, today=today)
    if not result.saved:
        # nothing valid to log: not an error, just nothing stored
        response.status_code = status.HTTP_200_OK
        return SaveResultRead(saved=False)
    repo.save(result.state.sessions)
    return SaveResultRead(saved=True, session=to_session_read(result.session, catalog))
