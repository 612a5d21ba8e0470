# liftlog/core/progression.py
"""
Double progression driven by the primary (first) set of the last entry.

Decision order: baseline -> reduce (isolation only) -> add weight -> add rep.
Each outcome is its own type carrying the numbers its instruction needs.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from liftlog.core.catalog import Exercise
from liftlog.core.numeric import clamp, format_num, format_weight, round_to_increment, safe_num
from liftlog.core.records import Entry


class ProgressionMode(str, Enum):
    baseline = "baseline"
    reduce = "reduce"
    add_weight = "add_weight"
    add_rep = "add_rep"


@dataclass(frozen=True, slots=True)
class Baseline:
    mode: ClassVar[ProgressionMode] = ProgressionMode.baseline
    exercise: Exercise
    start_reps: int
    next_weight: float = 0.0

    @property
    def instruction(self) -> str:
        return (f"Baseline: choose a load that lands ~{self.start_reps} reps "
                f"@RIR {format_num(self.exercise.target_rir)}.")


@dataclass(frozen=True, slots=True)
class Reduce:
    mode: ClassVar[ProgressionMode] = ProgressionMode.reduce
    exercise: Exercise
    next_weight: float

    @property
    def instruction(self) -> str:
        ex = self.exercise
        return (f"Reduce slightly: {format_weight(self.next_weight, ex.unit.value)} — "
                f"aim +1 rep while keeping ~RIR {format_num(ex.target_rir)}.")


@dataclass(frozen=True, slots=True)
class AddWeight:
    mode: ClassVar[ProgressionMode] = ProgressionMode.add_weight
    exercise: Exercise
    next_weight: float
    rep_low: int
    rep_high: int

    @property
    def instruction(self) -> str:
        ex = self.exercise
        return (f"Add {format_weight(ex.step, ex.unit.value)}: "
                f"{format_weight(self.next_weight, ex.unit.value)} — "
                f"aim {self.rep_low}–{self.rep_high} reps @RIR {format_num(ex.target_rir)}.")


@dataclass(frozen=True, slots=True)
class AddRep:
    mode: ClassVar[ProgressionMode] = ProgressionMode.add_rep
    exercise: Exercise
    next_weight: float
    target_reps: int
    rir_band: str

    @property
    def instruction(self) -> str:
        return (f"Same weight: {format_weight(self.next_weight, self.exercise.unit.value)} — "
                f"+1 rep (aim {self.target_reps}), keep RIR ~{self.rir_band}.")


Target = Union[Baseline, Reduce, AddWeight, AddRep]


def rir_band(exercise: Exercise) -> str:
    t = exercise.target_rir
    low = max(0, t - 1) if exercise.is_compound else max(1, t)
    return f"{format_num(low)}–{format_num(t)}"


def next_target(exercise: Exercise, last_entry: Entry | None) -> Target:
    rep_min, rep_max = exercise.rep_min, exercise.rep_max
    t_rir = safe_num(exercise.target_rir, 0.0)
    inc = exercise.step

    primary = last_entry.primary if last_entry is not None else None
    if primary is None:
        return Baseline(exercise=exercise, start_reps=min(rep_min + 1, rep_max))

    w = safe_num(primary.weight, 0.0)
    r = safe_num(primary.reps, 0.0)
    rir = safe_num(primary.rir, t_rir)

    # Too little in reserve on a joint-heavy single-joint movement: back off.
    if not exercise.is_compound and rir <= max(0.0, t_rir - 2):
        return Reduce(exercise=exercise, next_weight=round_to_increment(max(inc, w - inc), inc))

    if r >= rep_max and rir >= t_rir - 1:
        return AddWeight(
            exercise=exercise,
            next_weight=round_to_increment(w + inc, inc),
            rep_low=rep_min,
            rep_high=min(rep_min + 1, rep_max),
        )

    return AddRep(
        exercise=exercise,
        next_weight=w,
        target_reps=int(clamp(r + 1, rep_min, rep_max)),
        rir_band=rir_band(exercise),
    )
