"""REST API routes for users and their exercise logs."""

from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query
from api.dependencies import get_exercise_service, get_user_service, read_payload
from schemas.exercise import ExerciseResponse, LogResponse
from schemas.requests import UserCreate, load_payload
from schemas.user import UserResponse
from services.exercise_service import ExerciseService
from services.user_service import UserService
from utils.exceptions import ExerciseTrackerError, ServerError
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


# ---------------------------
# Users
# ---------------------------

@router.post("/users", response_model=UserResponse)
async def create_user(
    payload: Dict[str, Any] = Depends(read_payload),
    users: UserService = Depends(get_user_service),
):
    """Create a user, or return the existing one with the same username."""
    body = load_payload(UserCreate, payload)
    result = await users.create_or_fetch(body)

    if not result.ok:
        raise ServerError()

    return UserResponse.from_record(result.user)


@router.get("/users", response_model=List[UserResponse])
async def list_users(users: UserService = Depends(get_user_service)):
    """List all users."""
    try:
        records = await users.list_users()
        return [UserResponse.from_record(user) for user in records]
    except Exception as e:
        logger.error(f"Error listing users: {e}", exc_info=True)
        raise ServerError()


# ---------------------------
# Exercises
# ---------------------------

@router.post("/users/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    payload: Dict[str, Any] = Depends(read_payload),
    exercises: ExerciseService = Depends(get_exercise_service),
):
    """Add an exercise to a user's log."""
    try:
        return await exercises.add_exercise(user_id, payload)
    except ExerciseTrackerError:
        raise
    except Exception as e:
        logger.error(f"Error adding exercise for user {user_id}: {e}", exc_info=True)
        raise ServerError()


@router.get("/users/{user_id}/logs", response_model=LogResponse)
async def get_logs(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from", description="Inclusive lower date bound"),
    date_to: Optional[str] = Query(None, alias="to", description="Inclusive upper date bound"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    exercises: ExerciseService = Depends(get_exercise_service),
):
    """Get a user's exercise log, sorted by date ascending."""
    try:
        return await exercises.get_log(user_id, date_from=date_from, date_to=date_to, limit=limit)
    except ExerciseTrackerError:
        raise
    except Exception as e:
        logger.error(f"Error fetching log for user {user_id}: {e}", exc_info=True)
        raise ServerError()
