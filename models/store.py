"""Record store over the users and exercises collections."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError
from models.database import Database
from schemas.exercise import ExerciseRecord
from schemas.user import UserRecord
from utils.exceptions import ConflictError
from utils.logger import setup_logger

logger = setup_logger(__name__)


# ---------------------------
# Serializers
# ---------------------------

def user_serializer(document: Dict[str, Any]) -> UserRecord:
    """Convert a MongoDB user document to a record."""
    return UserRecord(id=str(document["_id"]), username=document["username"])


def exercise_serializer(document: Dict[str, Any]) -> ExerciseRecord:
    """Convert a MongoDB exercise document to a record."""
    return ExerciseRecord(
        id=str(document["_id"]),
        user_id=str(document["user_id"]),
        description=document["description"],
        duration=document["duration"],
        date=document["date"],
    )


def to_object_id(value: str) -> Optional[ObjectId]:
    """ObjectId for a hex string, or None when it cannot be one."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


class ExerciseStore:
    """Async access to users and exercises.

    Built once per application from a connected ``Database`` and injected
    into request handlers.
    """

    def __init__(self, users: AsyncIOMotorCollection, exercises: AsyncIOMotorCollection):
        self.users = users
        self.exercises = exercises

    @classmethod
    def from_database(cls, database: Database) -> "ExerciseStore":
        return cls(database.users, database.exercises)

    # ---------------------------
    # Users
    # ---------------------------

    async def find_user_by_username(self, username: str) -> Optional[UserRecord]:
        document = await self.users.find_one({"username": username})
        return user_serializer(document) if document else None

    async def find_user_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Look a user up by id; malformed ids simply do not resolve."""
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        document = await self.users.find_one({"_id": object_id})
        return user_serializer(document) if document else None

    async def insert_user(self, username: str) -> UserRecord:
        """Insert a user.

        Raises:
            ConflictError: the username is already taken (unique index).
        """
        try:
            result = await self.users.insert_one({"username": username})
        except DuplicateKeyError as e:
            raise ConflictError(username) from e
        logger.info(f"Created user: {username}")
        return UserRecord(id=str(result.inserted_id), username=username)

    async def list_users(self) -> List[UserRecord]:
        cursor = self.users.find({}, {"username": 1})
        documents = await cursor.to_list(length=None)
        return [user_serializer(document) for document in documents]

    # ---------------------------
    # Exercises
    # ---------------------------

    async def insert_exercise(
        self,
        user_id: str,
        description: str,
        duration: Union[int, float],
        date: datetime,
    ) -> ExerciseRecord:
        document = {
            "user_id": ObjectId(user_id),
            "description": description,
            "duration": duration,
            "date": date,
        }
        result = await self.exercises.insert_one(document)
        document["_id"] = result.inserted_id
        return exercise_serializer(document)

    async def find_exercises(
        self,
        user_id: str,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[ExerciseRecord]:
        """Exercises for a user within inclusive date bounds, earliest first."""
        query: Dict[str, Any] = {"user_id": ObjectId(user_id)}

        date_filter: Dict[str, datetime] = {}
        if date_from is not None:
            date_filter["$gte"] = date_from
        if date_to is not None:
            date_filter["$lte"] = date_to
        if date_filter:
            query["date"] = date_filter

        cursor = self.exercises.find(query).sort([("date", ASCENDING), ("_id", ASCENDING)])
        if limit:
            cursor = cursor.limit(limit)

        documents = await cursor.to_list(length=None)
        return [exercise_serializer(document) for document in documents]
