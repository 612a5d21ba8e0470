# liftlog/core/catalog.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping


class MovementClass(str, Enum):
    compound = "compound"
    isolation = "isolation"


class WeightUnit(str, Enum):
    kg = "kg"
    lb = "lb"


class DayKey(str, Enum):
    upper1 = "upper1"
    lower1 = "lower1"


@dataclass(frozen=True, slots=True)
class Exercise:
    id: str
    name: str
    sets: int
    rep_min: int
    rep_max: int
    target_rir: float
    movement: MovementClass
    unit: WeightUnit
    increment: float
    per_leg: bool = False

    @property
    def is_compound(self) -> bool:
        return self.movement is MovementClass.compound

    @property
    def step(self) -> float:
        """Load step used for all rounding; falls back by unit if unset."""
        if self.increment and self.increment > 0:
            return self.increment
        return 5.0 if self.unit is WeightUnit.lb else 2.5

    @property
    def rep_label(self) -> str:
        return f"{self.rep_min}–{self.rep_max}{'/leg' if self.per_leg else ''}"


@dataclass(frozen=True, slots=True)
class TrainingDay:
    key: DayKey
    name: str
    subtitle: str
    order: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Catalog:
    exercises_by_id: Mapping[str, Exercise]
    days: Mapping[DayKey, TrainingDay]

    @classmethod
    def build(cls, exercises: list[Exercise], days: list[TrainingDay]) -> "Catalog":
        by_id = {ex.id: ex for ex in exercises}
        if len(by_id) != len(exercises):
            raise ValueError("duplicate exercise id in catalog")
        for day in days:
            missing = [x for x in day.order if x not in by_id]
            if missing:
                raise ValueError(f"day {day.key.value} references unknown exercises: {missing}")
        return cls(
            exercises_by_id=MappingProxyType(by_id),
            days=MappingProxyType({d.key: d for d in days}),
        )

    def get(self, exercise_id: str) -> Exercise | None:
        return self.exercises_by_id.get(exercise_id)

    def day(self, key: "DayKey | str | None") -> TrainingDay | None:
        try:
            return self.days.get(DayKey(key))
        except (ValueError, TypeError):
            return None

    def day_order(self, key: DayKey) -> tuple[str, ...]:
        day = self.days.get(key)
        return day.order if day else ()

    def ordered_ids(self) -> list[str]:
        """upper1 order, then lower1 order, then anything not scheduled."""
        ids: list[str] = []
        for key in (DayKey.upper1, DayKey.lower1):
            ids.extend(x for x in self.day_order(key) if x not in ids)
        ids.extend(x for x in self.exercises_by_id if x not in ids)
        return ids

    def __iter__(self) -> Iterator[Exercise]:
        return (self.exercises_by_id[x] for x in self.ordered_ids())

    def day_label(self, key: str) -> str:
        day = self.day(key)
        if day:
            return day.name
        return key or "—"


_C, _I = MovementClass.compound, MovementClass.isolation
_KG, _LB = WeightUnit.kg, WeightUnit.lb

# Built once; pass it around, never mutate it.
DEFAULT_CATALOG = Catalog.build(
    exercises=[
        Exercise("fly_machine", "Chest Fly Machine", 2, 5, 10, 2, _I, _LB, 5),
        Exercise("high_row_cs", "Chest-supported high row", 2, 5, 10, 1, _C, _KG, 2.5),
        Exercise("lat_pulldown", "Lat Pulldown", 2, 5, 10, 1, _C, _KG, 2.5),
        Exercise("shoulder_press_u1", "Shoulder Press Machine", 1, 5, 10, 1, _C, _KG, 2.5),
        Exercise("pushdown_3pulley", "Tricep Rope Pushdown", 1, 5, 10, 2, _I, _KG, 2.5),
        Exercise("preacher_curl_machine", "Preacher Curl Machine", 1, 5, 10, 2, _I, _KG, 2.5),
        Exercise("leg_press_angled", "Angled Leg Press", 2, 4, 8, 2, _C, _KG, 10),
        Exercise("leg_curl_single_alt", "Single-leg seated leg curl", 2, 6, 10, 2, _I, _KG, 2.5, per_leg=True),
        Exercise("leg_ext_single_alt", "Single-leg leg extension", 1, 6, 10, 2, _I, _KG, 2.5, per_leg=True),
        Exercise("calf_press_leg_press", "Calf press on leg press", 2, 6, 10, 1, _I, _KG, 10),
    ],
    days=[
        TrainingDay(
            DayKey.upper1, "Upper 1", "Machines, low junk volume, cap 10 reps",
            ("fly_machine", "high_row_cs", "lat_pulldown", "shoulder_press_u1",
             "pushdown_3pulley", "preacher_curl_machine"),
        ),
        TrainingDay(
            DayKey.lower1, "Lower 1", "Leg press + single-leg curl/ext + calves",
            ("leg_press_angled", "leg_curl_single_alt", "leg_ext_single_alt", "calf_press_leg_press"),
        ),
    ],
)
