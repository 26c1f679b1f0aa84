"""FastAPI dependencies that hand the injected store to route handlers."""

from typing import Any, Dict
from fastapi import Depends, Request
from models.store import ExerciseStore
from services.exercise_service import ExerciseService
from services.user_service import UserService
from utils.exceptions import ServerError, ValidationError


def get_store(request: Request) -> ExerciseStore:
    """Return the store attached to the application at startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise ServerError()
    return store


def get_user_service(store: ExerciseStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_exercise_service(store: ExerciseStore = Depends(get_store)) -> ExerciseService:
    return ExerciseService(store)


async def read_payload(request: Request) -> Dict[str, Any]:
    """Read a JSON or form body into a dict.

    Bodies with any other content type are treated as empty.
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            raise ValidationError("invalid JSON body")
        return data if isinstance(data, dict) else {}

    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return dict(form)

    return {}
