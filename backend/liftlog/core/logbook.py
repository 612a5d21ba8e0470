# liftlog/core/logbook.py
"""
Saving a day's log into the history, the blank form for the next log, and the
baseline state a fresh install starts from.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Iterable, Mapping

from liftlog.core import warmup
from liftlog.core.analytics import parse_day
from liftlog.core.catalog import Catalog, DayKey, Exercise, TrainingDay
from liftlog.core.records import (
    Entry,
    Profile,
    Session,
    SetRecord,
    TrainingState,
    coerce_items,
    new_session_id,
)
from liftlog.core.scoreboard import ScoreRow
from liftlog.core.warmup import WarmupSet

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SaveResult:
    state: TrainingState
    session: Session | None

    @property
    def saved(self) -> bool:
        return self.session is not None


def next_seq(sessions: Iterable[Session]) -> int:
    return max((s.seq or 0 for s in sessions), default=0) + 1


def save_session(
    state: TrainingState,
    draft: Mapping[str, Any],
    catalog: Catalog,
    *,
    today: date | None = None,
    session_id: str | None = None,
) -> SaveResult:
    """
    Upsert a day's log by ``(date, day_key)``.

    Returns a new state; ``state`` itself is left alone. A draft without a
    single valid set is a no-op and hands back the same state.
    """
    day = catalog.day(draft.get("day_key"))
    on_day = parse_day(str(draft.get("date") or "")) or today or date.today()
    items = coerce_items(draft.get("items"))
    if day is not None:
        items = {x: items[x] for x in day.order if x in items}
    else:
        items = {}

    if not items:
        log.info("nothing to save for %s %s", on_day.isoformat(), draft.get("day_key"))
        return SaveResult(state=state, session=None)

    notes = draft.get("notes")
    session = Session(
        id=session_id or new_session_id(),
        date=on_day.isoformat(),
        day_key=day.key.value,
        notes=notes.strip() if isinstance(notes, str) else "",
        items=items,
        seq=next_seq(state.sessions),
    )

    sessions = list(state.sessions)
    existing = next(
        (i for i, s in enumerate(sessions) if s.date == session.date and s.day_key == session.day_key),
        None,
    )
    if existing is None:
        sessions.insert(0, session)
    else:
        log.info("replacing session %s (%s %s)", sessions[existing].id, session.date, session.day_key)
        sessions[existing] = session
    return SaveResult(state=replace(state, sessions=tuple(sessions)), session=session)


@dataclass(frozen=True, slots=True)
class TemplateEntry:
    exercise: Exercise
    sets: list[dict[str, Any]]
    planned_weight: float
    instruction: str
    warmups: list[WarmupSet]
    rest: str


@dataclass(frozen=True, slots=True)
class LogTemplate:
    day: TrainingDay
    date: str
    entries: list[TemplateEntry]


def blank_sets(count: int) -> list[dict[str, Any]]:
    return [{"weight": None, "reps": None, "rir": None, "note": ""} for _ in range(count)]


def log_template(
    catalog: Catalog,
    day_key: DayKey,
    scoreboard: Iterable[ScoreRow],
    *,
    today: date | None = None,
) -> LogTemplate:
    """Blank form for a day, with set 1 pre-filled from the scoreboard."""
    day = catalog.days[day_key]
    rows = {row.exercise.id: row for row in scoreboard}
    entries = []
    for ex_id in day.order:
        ex = catalog.exercises_by_id[ex_id]
        row = rows.get(ex_id)
        planned = row.working_weight if row else 0.0
        sets = blank_sets(ex.sets)
        if planned and sets:
            sets[0]["weight"] = planned
        entries.append(TemplateEntry(
            exercise=ex,
            sets=sets,
            planned_weight=planned,
            instruction=row.target.instruction if row else "",
            warmups=warmup.plan(ex, planned),
            rest=warmup.rest_guidance(ex.movement),
        ))
    return LogTemplate(day=day, date=(today or date.today()).isoformat(), entries=entries)


def _entry(ex_id: str, *sets: tuple[float, float, float, str]) -> Entry:
    return Entry(ex_id, tuple(SetRecord(weight=w, reps=r, rir=rir, note=n) for w, r, rir, n in sets))


def default_state(profile: Profile | None = None) -> TrainingState:
    """The baseline numbers a fresh log starts from."""
    # snapshot is newest first: upper1 ranks as the latest session
    upper = Session(
        id="sess_baseline_upper1",
        date="2026-01-02",
        day_key=DayKey.upper1.value,
        notes="Baseline",
        items={
            "fly_machine": _entry("fly_machine", (118, 6, 2, "")),
            "high_row_cs": _entry("high_row_cs", (80, 5, 1, "")),
            "shoulder_press_u1": _entry("shoulder_press_u1", (40, 5, 1, "")),
            "pushdown_3pulley": _entry("pushdown_3pulley", (50, 5, 2, "3-pulley")),
        },
        seq=2,
    )
    lower = Session(
        id="sess_baseline_lower1",
        date="2026-01-02",
        day_key=DayKey.lower1.value,
        notes="Baseline",
        items={
            "leg_press_angled": _entry(
                "leg_press_angled", (160, 5, 2.5, "set 1"), (160, 7, 1, "set 2"),
            ),
            "calf_press_leg_press": _entry(
                "calf_press_leg_press", (160, 8, 1.5, "only 1 working set that day"),
            ),
        },
        seq=1,
    )
    return TrainingState(profile=profile or Profile(), sessions=(upper, lower))
