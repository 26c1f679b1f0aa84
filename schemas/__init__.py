"""Collection schemas organized by collection type."""

from schemas.user import UserRecord, UserResponse
from schemas.exercise import ExerciseRecord, ExerciseResponse, LogEntry, LogResponse
from schemas.requests import ExerciseCreate, UserCreate, load_payload

__all__ = [
    "UserRecord",
    "UserResponse",
    "ExerciseRecord",
    "ExerciseResponse",
    "LogEntry",
    "LogResponse",
    "ExerciseCreate",
    "UserCreate",
    "load_payload",
]
