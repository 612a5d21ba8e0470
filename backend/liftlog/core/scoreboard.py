# liftlog/core/scoreboard.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from liftlog.core import warmup
from liftlog.core.catalog import Catalog, Exercise
from liftlog.core.numeric import EPSILON, format_num, format_weight, safe_num
from liftlog.core.progression import Target, next_target
from liftlog.core.records import Entry, Session, sort_sessions_desc
from liftlog.core.warmup import WarmupSet

NO_ENTRY = "—"


@dataclass(frozen=True, slots=True)
class LoggedEntry:
    session: Session
    entry: Entry


@dataclass(frozen=True, slots=True)
class ScoreRow:
    exercise: Exercise
    last: LoggedEntry | None
    prev: LoggedEntry | None
    last_text: str
    prev_text: str
    change: str
    target: Target
    working_weight: float
    warmups: list[WarmupSet]
    rest: str


def find_last_two(sessions: Iterable[Session], exercise_id: str) -> tuple[LoggedEntry | None, LoggedEntry | None]:
    found: list[LoggedEntry] = []
    for s in sort_sessions_desc(sessions):
        entry = s.entry_for(exercise_id)
        if entry is not None:
            found.append(LoggedEntry(session=s, entry=entry))
            if len(found) == 2:
                break
    last = found[0] if found else None
    prev = found[1] if len(found) > 1 else None
    return last, prev


def _signed(value: float, text: str) -> str:
    return f"{'+' if value > 0 else ''}{text}"


def describe_change(last: LoggedEntry | None, prev: LoggedEntry | None, unit: str) -> str:
    """Primary-set delta between the last two entries, e.g. ``+2.5kg • -1 rep``."""
    if last is None or prev is None:
        return "Baseline"
    l, p = last.entry.primary, prev.entry.primary
    if l is None or p is None:
        return NO_ENTRY

    dw = safe_num(l.weight) - safe_num(p.weight)
    dr = int(round(safe_num(l.reps) - safe_num(p.reps)))
    d_rir = safe_num(l.rir) - safe_num(p.rir)

    parts: list[str] = []
    if abs(dw) > EPSILON:
        parts.append(_signed(dw, format_weight(dw, unit)))
    if dr != 0:
        parts.append(_signed(dr, f"{dr} rep{'' if abs(dr) == 1 else 's'}"))
    if abs(d_rir) > EPSILON:
        parts.append(_signed(d_rir, f"{format_num(d_rir)} RIR"))
    return " • ".join(parts) if parts else "Same"


def entry_line(logged: LoggedEntry | None, unit: str) -> str:
    if logged is None or logged.entry.primary is None:
        return NO_ENTRY
    s = logged.entry.primary
    rir = NO_ENTRY if s.rir is None else format_num(s.rir)
    return f"{format_weight(s.weight, unit)} × {format_num(s.reps)} @RIR {rir} • {logged.session.date}"


def working_weight(target: Target, last: LoggedEntry | None) -> float:
    if target.next_weight:
        return target.next_weight
    if last is not None and last.entry.primary is not None:
        return last.entry.primary.weight
    return 0.0


def score_exercise(exercise: Exercise, sessions: Iterable[Session]) -> ScoreRow:
    last, prev = find_last_two(sessions, exercise.id)
    unit = exercise.unit.value
    target = next_target(exercise, last.entry if last else None)
    working = working_weight(target, last)
    return ScoreRow(
        exercise=exercise,
        last=last,
        prev=prev,
        last_text=entry_line(last, unit),
        prev_text=entry_line(prev, unit),
        change=describe_change(last, prev, unit),
        target=target,
        working_weight=working,
        warmups=warmup.plan(exercise, working),
        rest=warmup.rest_guidance(exercise.movement),
    )


def build_scoreboard(catalog: Catalog, sessions: Iterable[Session]) -> list[ScoreRow]:
    """One row per catalog exercise: upper1 order, then lower1 order."""
    snapshot = tuple(sessions)
    return [score_exercise(ex, snapshot) for ex in catalog]
