# liftlog/core/analytics.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from liftlog.core.catalog import DayKey
from liftlog.core.numeric import safe_num
from liftlog.core.records import Session, sort_sessions_desc

WEEK_WINDOW_DAYS = 7


@dataclass(frozen=True, slots=True)
class Analytics:
    total_count: int
    last_date: str | None
    days_since_last: int | None
    sessions_in_last_7_days: int
    streak: int


@dataclass(frozen=True, slots=True)
class TrendPoint:
    date: str
    reps: float
    weight: float


def parse_day(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def streak(days: Iterable[date]) -> int:
    """Consecutive calendar days ending at the most recent one."""
    distinct = sorted(set(days), reverse=True)
    if not distinct:
        return 0
    count = 1
    for newer, older in zip(distinct, distinct[1:]):
        if newer - older != timedelta(days=1):
            break
        count += 1
    return count


def analyze(sessions: Iterable[Session], today: date | None = None) -> Analytics:
    today = today or date.today()
    ordered = sort_sessions_desc(sessions)
    days = [d for d in (parse_day(s.date) for s in ordered) if d is not None]

    last_date = ordered[0].date if ordered and ordered[0].date else None
    last_day = parse_day(last_date)
    since_last = max(0, (today - last_day).days) if last_day else None

    window_start = today - timedelta(days=WEEK_WINDOW_DAYS - 1)
    in_week = sum(1 for d in days if window_start <= d <= today)

    return Analytics(
        total_count=len(ordered),
        last_date=last_date,
        days_since_last=since_last,
        sessions_in_last_7_days=in_week,
        streak=streak(days),
    )


def exercise_trend(sessions: Iterable[Session], exercise_id: str) -> list[TrendPoint]:
    """Primary-set weight/reps per session, oldest first."""
    points = []
    for s in reversed(sort_sessions_desc(sessions)):
        entry = s.entry_for(exercise_id)
        if entry is None:
            continue
        p = entry.primary
        points.append(TrendPoint(date=s.date, reps=safe_num(p.reps), weight=safe_num(p.weight)))
    return points


def next_up(sessions: Iterable[Session]) -> DayKey:
    ordered = sort_sessions_desc(sessions)
    if ordered and ordered[0].day_key == DayKey.upper1.value:
        return DayKey.lower1
    return DayKey.upper1
