from pydantic import BaseModel

from liftlog.core.records import TrainingState
from liftlog.schemas.session import SessionDoc

class ProfileDoc(BaseModel):
    name: str
    device: str

    model_config = {"from_attributes": True}

class StateDocument(BaseModel):
    """Whole-log backup: what /export writes and /import reads back."""
    version: int
    profile: ProfileDoc
    sessions: list[SessionDoc]

    model_config = {"from_attributes": True}

    @classmethod
    def from_state(cls, state: TrainingState) -> "StateDocument":
        return cls.model_validate(state)

class ImportResult(BaseModel):
    sessions: int
