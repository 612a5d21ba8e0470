from typing import Annotated
import datetime as dt
from pydantic import BaseModel, StringConstraints

from liftlog.core.catalog import DayKey

# Form fields arrive as numbers or raw text ("", "118"); the logbook coerces them
Numberish = float | str | None
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

class SetIn(BaseModel):
    weight: Numberish = None
    reps: Numberish = None
    rir: Numberish = None
    note: NotesStr = ""

class EntryIn(BaseModel):
    sets: list[SetIn] = []

class SessionCreate(BaseModel):
    date: dt.date | None = None     # defaults to today
    day_key: DayKey
    notes: NotesStr = ""
    items: dict[str, EntryIn] = {}

class SetRead(BaseModel):
    weight: float
    reps: float
    rir: float | None = None
    note: str = ""

    model_config = {"from_attributes": True}

class EntryRead(BaseModel):
    exercise_id: str
    sets: list[SetRead]

    model_config = {"from_attributes": True}

class SessionDoc(BaseModel):
    """A stored session as it appears in history and in backups."""
    id: str
    seq: int | None = None
    date: str
    day_key: str
    notes: str = ""
    items: dict[str, EntryRead]

    model_config = {"from_attributes": True}

class SessionRead(SessionDoc):
    day_label: str = ""
    # "S1: 80kg × 5 @RIR 1" per set, grouped by exercise id
    lines: dict[str, list[str]] = {}

class SaveResultRead(BaseModel):
    saved: bool
    session: SessionRead | None = None
