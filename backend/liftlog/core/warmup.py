# liftlog/core/warmup.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from liftlog.core.catalog import Exercise, MovementClass
from liftlog.core.numeric import round_to_increment, safe_num


@dataclass(frozen=True, slots=True)
class WarmupSet:
    weight: float
    reps: str
    note: str


# (fraction of working weight, reps label, note)
COMPOUND_RAMP = (
    (0.50, "8", "~50%"),
    (0.70, "4–5", "~70%"),
    (0.85, "1–2", "~85%"),
    (0.93, "1", "Optional primer ~92–95% (only if snappy)"),
)
ISOLATION_RAMP = (
    (0.55, "8–10", "~50–60%"),
    (0.80, "3–5", "~75–85%"),
)


def plan(exercise: Exercise, working_weight: Any) -> list[WarmupSet]:
    """
    Ascending warm-up sets toward ``working_weight``.

    Each stage is rounded to the exercise's load step and floored at one step;
    a stage is dropped unless it is heavier than the last one kept, so coarse
    steps collapse into fewer sets.
    """
    w = safe_num(working_weight, 0.0)
    if w <= 0:
        return []
    inc = exercise.step
    ramp = COMPOUND_RAMP if exercise.is_compound else ISOLATION_RAMP

    out: list[WarmupSet] = []
    for pct, reps, note in ramp:
        weight = max(inc, round_to_increment(w * pct, inc))
        if out and weight <= out[-1].weight:
            continue
        out.append(WarmupSet(weight=weight, reps=reps, note=note))
    return out


def rest_guidance(movement: MovementClass | str) -> str:
    if movement == MovementClass.compound:
        return "2–3 min before top set"
    return "60–90 sec before top set"
