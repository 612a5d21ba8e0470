from fastapi import APIRouter, Depends

from liftlog.core.analytics import analyze, next_up
from liftlog.core.catalog import Catalog
from liftlog.core.records import TrainingState, sort_sessions_desc
from liftlog.deps.store import get_catalog, get_state, get_today
from liftlog.schemas.analytics import AnalyticsRead

router = APIRouter(tags=["analytics"])

@router.get("/analytics", response_model=AnalyticsRead)
def read_analytics(
    state: TrainingState = Depends(get_state),
    catalog: Catalog = Depends(get_catalog),
    today=Depends(get_today),
):
    stats = analyze(state.sessions, today=today)
    upcoming = next_up(state.sessions)
    ordered = sort_sessions_desc(state.sessions)
    last = ordered[0] if ordered else None
    return AnalyticsRead(
        total_count=stats.total_count,
        last_date=stats.last_date,
        days_since_last=stats.days_since_last,
        sessions_in_last_7_days=stats.sessions_in_last_7_days,
        streak=stats.streak,
        next_up=upcoming,
        next_up_label=catalog.day_label(upcoming.value),
        last_session_label=f"{last.date} • {catalog.day_label(last.day_key)}" if last else None,
    )
