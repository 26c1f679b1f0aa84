"""Exercise collection schema and log responses."""

from datetime import datetime
from typing import List, Union
from pydantic import BaseModel, Field


class ExerciseRecord(BaseModel):
    """Exercise collection model."""
    id: str = Field(..., description="Store-generated exercise identifier")
    user_id: str = Field(..., description="Owning user identifier")
    description: str = Field(..., description="What was done")
    duration: Union[int, float] = Field(..., description="Duration in minutes")
    date: datetime = Field(..., description="Exercise date at UTC midnight")


class ExerciseResponse(BaseModel):
    """Response returned after adding an exercise; ``id`` is the user's id."""
    id: str
    username: str
    date: str
    duration: Union[int, float]
    description: str


class LogEntry(BaseModel):
    description: str
    duration: Union[int, float]
    date: str


class LogResponse(BaseModel):
    """A user's filtered, date-sorted exercise log."""
    username: str
    count: int
    id: str
    log: List[LogEntry]
