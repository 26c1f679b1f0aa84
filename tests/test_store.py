"""Unit tests for ExerciseStore against mocked motor collections."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from models.store import ExerciseStore, to_object_id
from utils.exceptions import ConflictError


def make_cursor(documents):
    """Mock motor cursor supporting sort/limit chaining."""
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=documents)
    return cursor


@pytest.fixture
def users():
    return MagicMock()


@pytest.fixture
def exercises():
    return MagicMock()


@pytest.fixture
def mongo_store(users, exercises):
    return ExerciseStore(users, exercises)


def test_to_object_id():
    oid = ObjectId()
    assert to_object_id(str(oid)) == oid
    assert to_object_id(oid) is oid
    assert to_object_id("not-an-id") is None
    assert to_object_id(None) is None


class TestUsers:
    """Test user queries."""

    @pytest.mark.asyncio
    async def test_insert_user(self, mongo_store, users):
        oid = ObjectId()
        users.insert_one = AsyncMock(return_value=MagicMock(inserted_id=oid))

        user = await mongo_store.insert_user("alice")

        users.insert_one.assert_awaited_once_with({"username": "alice"})
        assert user.id == str(oid)
        assert user.username == "alice"

    @pytest.mark.asyncio
    async def test_duplicate_key_becomes_conflict(self, mongo_store, users):
        users.insert_one = AsyncMock(side_effect=DuplicateKeyError("E11000 duplicate key error"))

        with pytest.raises(ConflictError) as exc_info:
            await mongo_store.insert_user("alice")

        assert exc_info.value.username == "alice"

    @pytest.mark.asyncio
    async def test_find_user_by_id_skips_malformed_ids(self, mongo_store, users):
        users.find_one = AsyncMock()

        assert await mongo_store.find_user_by_id("bad-id") is None
        users.find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_find_user_by_id(self, mongo_store, users):
        oid = ObjectId()
        users.find_one = AsyncMock(return_value={"_id": oid, "username": "alice"})

        user = await mongo_store.find_user_by_id(str(oid))

        users.find_one.assert_awaited_once_with({"_id": oid})
        assert user.id == str(oid)

    @pytest.mark.asyncio
    async def test_list_users_projects_username(self, mongo_store, users):
        documents = [{"_id": ObjectId(), "username": name} for name in ("alice", "bob")]
        users.find.return_value = make_cursor(documents)

        result = await mongo_store.list_users()

        users.find.assert_called_once_with({}, {"username": 1})
        assert [user.username for user in result] == ["alice", "bob"]


class TestExercises:
    """Test exercise inserts and log queries."""

    @pytest.mark.asyncio
    async def test_insert_exercise(self, mongo_store, exercises):
        user_id = ObjectId()
        oid = ObjectId()
        exercises.insert_one = AsyncMock(return_value=MagicMock(inserted_id=oid))

        record = await mongo_store.insert_exercise(str(user_id), "run", 30, datetime(2024, 1, 1))

        inserted = exercises.insert_one.await_args.args[0]
        assert inserted["user_id"] == user_id
        assert record.id == str(oid)
        assert record.user_id == str(user_id)
        assert record.duration == 30

    @pytest.mark.asyncio
    async def test_find_exercises_builds_inclusive_range(self, mongo_store, exercises):
        user_id = ObjectId()
        cursor = make_cursor([])
        exercises.find.return_value = cursor

        await mongo_store.find_exercises(
            str(user_id),
            date_from=datetime(2024, 1, 1),
            date_to=datetime(2024, 1, 31),
            limit=5,
        )

        exercises.find.assert_called_once_with({
            "user_id": user_id,
            "date": {"$gte": datetime(2024, 1, 1), "$lte": datetime(2024, 1, 31)},
        })
        cursor.sort.assert_called_once_with([("date", ASCENDING), ("_id", ASCENDING)])
        cursor.limit.assert_called_once_with(5)

    @pytest.mark.asyncio
    async def test_find_exercises_without_filters(self, mongo_store, exercises):
        user_id = ObjectId()
        documents = [{
            "_id": ObjectId(),
            "user_id": user_id,
            "description": "run",
            "duration": 30,
            "date": datetime(2024, 1, 1),
        }]
        cursor = make_cursor(documents)
        exercises.find.return_value = cursor

        result = await mongo_store.find_exercises(str(user_id))

        exercises.find.assert_called_once_with({"user_id": user_id})
        cursor.limit.assert_not_called()
        assert result[0].description == "run"
