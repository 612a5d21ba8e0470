from fastapi import APIRouter, Depends, HTTPException, status

from liftlog.core.catalog import Catalog
from liftlog.core.logbook import log_template
from liftlog.core.records import TrainingState
from liftlog.core.scoreboard import ScoreRow, build_scoreboard
from liftlog.deps.store import get_catalog, get_state, get_today
from liftlog.schemas.catalog import ExerciseRead
from liftlog.schemas.scoreboard import LogTemplateRead, ScoreRowRead, TargetRead, WarmupSetRead

router = APIRouter(tags=["scoreboard"])

def to_row_read(row: ScoreRow) -> ScoreRowRead:
    return ScoreRowRead(
        exercise=ExerciseRead.model_validate(row.exercise),
        last=row.last_text,
        prev=row.prev_text,
        last_date=row.last.session.date if row.last else None,
        change=row.change,
        target=TargetRead.from_target(row.target),
        working_weight=row.working_weight,
        warmups=[WarmupSetRead.model_validate(w) for w in row.warmups],
        rest=row.rest,
    )

@router.get("/scoreboard", response_model=list[ScoreRowRead])
def scoreboard(
    state: TrainingState = Depends(get_state),
    catalog: Catalog = Depends(get_catalog),
):
    return [to_row_read(r) for r in build_scoreboard(catalog, state.sessions)]

@router.get("/log/{day_key}", response_model=LogTemplateRead)
def blank_log(
    day_key: str,
    state: TrainingState = Depends(get_state),
    catalog: Catalog = Depends(get_catalog),
    today=Depends(get_today),
):
    day = catalog.day(day_key)
    if day is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown training day")
    rows = build_scoreboard(catalog, state.sessions)
    return LogTemplateRead.model_validate(log_template(catalog, day.key, rows, today=today))
