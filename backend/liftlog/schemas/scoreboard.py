from pydantic import BaseModel

from liftlog.core.progression import ProgressionMode, Target
from liftlog.schemas.catalog import ExerciseRead, TrainingDayRead

class WarmupSetRead(BaseModel):
    weight: float
    reps: str
    note: str

    model_config = {"from_attributes": True}

class WarmupPlanRead(BaseModel):
    exercise_id: str
    working_weight: float
    rest: str
    sets: list[WarmupSetRead]

class TargetRead(BaseModel):
    mode: ProgressionMode
    next_weight: float
    instruction: str
    # set only for the modes that carry them
    target_reps: int | None = None
    rep_low: int | None = None
    rep_high: int | None = None
    rir_band: str | None = None

    @classmethod
    def from_target(cls, target: Target) -> "TargetRead":
        return cls(
            mode=target.mode,
            next_weight=target.next_weight,
            instruction=target.instruction,
            target_reps=getattr(target, "target_reps", None) or getattr(target, "start_reps", None),
            rep_low=getattr(target, "rep_low", None),
            rep_high=getattr(target, "rep_high", None),
            rir_band=getattr(target, "rir_band", None),
        )

class ScoreRowRead(BaseModel):
    exercise: ExerciseRead
    last: str
    prev: str
    last_date: str | None = None
    change: str
    target: TargetRead
    working_weight: float
    warmups: list[WarmupSetRead]
    rest: str

class TemplateEntryRead(BaseModel):
    exercise: ExerciseRead
    sets: list[dict]
    planned_weight: float
    instruction: str
    warmups: list[WarmupSetRead]
    rest: str

    model_config = {"from_attributes": True}

class LogTemplateRead(BaseModel):
    day: TrainingDayRead
    date: str
    entries: list[TemplateEntryRead]

    model_config = {"from_attributes": True}
