from liftlog.models.session import TrainingSession
from liftlog.models.exercise_set import ExerciseSet

__all__ = ["TrainingSession", "ExerciseSet"]
