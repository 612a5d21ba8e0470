from pydantic import BaseModel

from liftlog.core.catalog import DayKey, MovementClass, WeightUnit

class ExerciseRead(BaseModel):
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
    rep_label: str

    model_config = {"from_attributes": True}

class TrainingDayRead(BaseModel):
    key: DayKey
    name: str
    subtitle: str
    order: list[str]

    model_config = {"from_attributes": True}

class CatalogRead(BaseModel):
    exercises: list[ExerciseRead]
    days: list[TrainingDayRead]
