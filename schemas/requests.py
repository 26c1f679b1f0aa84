"""Request body models for user and exercise creation."""

from datetime import datetime
from typing import Any, Dict, Type, TypeVar, Union
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator
from utils.exceptions import ValidationError
from utils.helpers import clean_text, parse_date, parse_duration, today_utc

ModelT = TypeVar("ModelT", bound=BaseModel)


class UserCreate(BaseModel):
    """Body of ``POST /api/users``."""
    username: str = Field(None, validate_default=True, description="Username, trimmed")

    @field_validator("username", mode="before")
    @classmethod
    def require_username(cls, value: Any) -> str:
        username = clean_text(value)
        if not username:
            raise ValueError("username required")
        return username


class ExerciseCreate(BaseModel):
    """Body of ``POST /api/users/{id}/exercises``."""
    description: str = Field(None, validate_default=True, description="What was done, trimmed")
    duration: Union[int, float] = Field(None, validate_default=True, description="Positive duration in minutes")
    date: datetime = Field(None, validate_default=True, description="Exercise date; today when absent or invalid")

    @field_validator("description", mode="before")
    @classmethod
    def require_description(cls, value: Any) -> str:
        description = clean_text(value)
        if not description:
            raise ValueError("description required")
        return description

    @field_validator("duration", mode="before")
    @classmethod
    def require_positive_duration(cls, value: Any) -> Union[int, float]:
        minutes = parse_duration(value)
        if minutes is None or minutes <= 0:
            raise ValueError("duration required and must be a number")
        return minutes

    @field_validator("date", mode="before")
    @classmethod
    def lenient_date(cls, value: Any) -> datetime:
        """Unparseable dates fall back to today rather than failing."""
        return parse_date(value) or today_utc()


def load_payload(model: Type[ModelT], payload: Dict[str, Any]) -> ModelT:
    """Validate a request body, reporting the first failure as a ValidationError."""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        error = e.errors()[0]
        reason = error.get("ctx", {}).get("error", error["msg"])
        raise ValidationError(str(reason)) from e
