"""Adding exercises and building exercise logs."""

from typing import Any, Dict, Optional
from models.store import ExerciseStore
from schemas.exercise import ExerciseResponse, LogEntry, LogResponse
from schemas.requests import ExerciseCreate, load_payload
from services.user_service import UserService
from utils.helpers import format_day, parse_date, parse_limit


class ExerciseService:
    """Exercise operations over an injected store."""

    def __init__(self, store: ExerciseStore):
        self.store = store
        self.users = UserService(store)

    async def add_exercise(self, user_id: str, payload: Dict[str, Any]) -> ExerciseResponse:
        """Validate and persist an exercise for an existing user.

        The user is resolved before the body is validated. An absent or
        unparseable date falls back to today (UTC) rather than being rejected.
        """
        user = await self.users.get_user(user_id)
        body = load_payload(ExerciseCreate, payload)

        exercise = await self.store.insert_exercise(user.id, body.description, body.duration, body.date)

        return ExerciseResponse(
            id=user.id,
            username=user.username,
            date=format_day(exercise.date),
            duration=exercise.duration,
            description=exercise.description,
        )

    async def get_log(
        self,
        user_id: str,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> LogResponse:
        """Date-filtered exercise log, earliest first, optionally truncated.

        Bounds and limit that do not parse are ignored.
        """
        user = await self.users.get_user(user_id)

        exercises = await self.store.find_exercises(
            user.id,
            date_from=parse_date(date_from),
            date_to=parse_date(date_to),
            limit=parse_limit(limit),
        )

        log = [
            LogEntry(
                description=exercise.description,
                duration=exercise.duration,
                date=format_day(exercise.date),
            )
            for exercise in exercises
        ]

        return LogResponse(username=user.username, count=len(log), id=user.id, log=log)
