from pydantic import BaseModel

from liftlog.core.catalog import DayKey

class AnalyticsRead(BaseModel):
    total_count: int
    last_date: str | None = None
    days_since_last: int | None = None
    sessions_in_last_7_days: int
    streak: int
    next_up: DayKey
    next_up_label: str
    last_session_label: str | None = None   # "2026-01-02 • Upper 1"

class TrendPointRead(BaseModel):
    date: str
    reps: float
    weight: float

    model_config = {"from_attributes": True}

class TrendRead(BaseModel):
    exercise_id: str
    unit: str
    points: list[TrendPointRead]
