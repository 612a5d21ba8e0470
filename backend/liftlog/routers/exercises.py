from fastapi import APIRouter, Depends, HTTPException, Query, status

from liftlog.core import warmup
from liftlog.core.analytics import exercise_trend
from liftlog.core.catalog import Catalog, Exercise
from liftlog.core.records import TrainingState
from liftlog.deps.store import get_catalog, get_state
from liftlog.schemas.analytics import TrendPointRead, TrendRead
from liftlog.schemas.catalog import CatalogRead, ExerciseRead, TrainingDayRead
from liftlog.schemas.scoreboard import WarmupPlanRead, WarmupSetRead

router = APIRouter(tags=["exercises"])

def _exercise_or_404(catalog: Catalog, exercise_id: str) -> Exercise:
    ex = catalog.get(exercise_id)
    if ex is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return ex

@router.get("/catalog", response_model=CatalogRead)
def read_catalog(catalog: Catalog = Depends(get_catalog)):
    return CatalogRead(
        exercises=[ExerciseRead.model_validate(ex) for ex in catalog],
        days=[TrainingDayRead.model_validate(d) for d in catalog.days.values()],
    )

@router.get("/exercises/{exercise_id}/warmup", response_model=WarmupPlanRead)
def warmup_plan(
    exercise_id: str,
    weight: float = Query(..., ge=0, description="Working weight to ramp toward"),
    catalog: Catalog = Depends(get_catalog),
):
    ex = _exercise_or_404(catalog, exercise_id)
    return WarmupPlanRead(
        exercise_id=ex.id,
        working_weight=weight,
        rest=warmup.rest_guidance(ex.movement),
        sets=[WarmupSetRead.model_validate(w) for w in warmup.plan(ex, weight)],
    )

@router.get("/exercises/{exercise_id}/trend", response_model=TrendRead)
def trend(
    exercise_id: str,
    state: TrainingState = Depends(get_state),
    catalog: Catalog = Depends(get_catalog),
):
    ex = _exercise_or_404(catalog, exercise_id)
    points = exercise_trend(state.sessions, ex.id)
    return TrendRead(
        exercise_id=ex.id,
        unit=ex.unit.value,
        points=[TrendPointRead.model_validate(p) for p in points],
    )
