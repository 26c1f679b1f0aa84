"""In-memory stand-in for ExerciseStore used by the tests."""

from datetime import datetime
from typing import Dict, List, Optional, Set, Union
from bson import ObjectId

from models.store import to_object_id
from schemas.exercise import ExerciseRecord
from schemas.user import UserRecord
from utils.exceptions import ConflictError


class InMemoryStore:
    """Same interface as ExerciseStore, backed by dicts.

    Usernames listed in ``race_usernames`` simulate a concurrent request that
    inserts the same username between our lookup and our insert.
    """

    def __init__(self):
        self.users: Dict[str, UserRecord] = {}
        self.exercises: List[ExerciseRecord] = []
        self.race_usernames: Set[str] = set()
        self.fail_on: Set[str] = set()

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise RuntimeError(f"store unavailable during {operation}")

    def _add_user(self, username: str) -> UserRecord:
        user = UserRecord(id=str(ObjectId()), username=username)
        self.users[user.id] = user
        return user

    async def find_user_by_username(self, username: str) -> Optional[UserRecord]:
        self._check("find_user_by_username")
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    async def find_user_by_id(self, user_id: str) -> Optional[UserRecord]:
        self._check("find_user_by_id")
        if to_object_id(user_id) is None:
            return None
        return self.users.get(user_id)

    async def insert_user(self, username: str) -> UserRecord:
        self._check("insert_user")
        if username in self.race_usernames:
            self.race_usernames.discard(username)
            self._add_user(username)
        if any(user.username == username for user in self.users.values()):
            raise ConflictError(username)
        return self._add_user(username)

    async def list_users(self) -> List[UserRecord]:
        self._check("list_users")
        return list(self.users.values())

    async def insert_exercise(
        self,
        user_id: str,
        description: str,
        duration: Union[int, float],
        date: datetime,
    ) -> ExerciseRecord:
        self._check("insert_exercise")
        exercise = ExerciseRecord(
            id=str(ObjectId()),
            user_id=user_id,
            description=description,
            duration=duration,
            date=date,
        )
        self.exercises.append(exercise)
        return exercise

    async def find_exercises(
        self,
        user_id: str,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[ExerciseRecord]:
        self._check("find_exercises")
        matches = [
            exercise for exercise in self.exercises
            if exercise.user_id == user_id
            and (date_from is None or exercise.date >= date_from)
            and (date_to is None or exercise.date <= date_to)
        ]
        matches.sort(key=lambda exercise: exercise.date)
        if limit:
            matches = matches[:limit]
        return matches
