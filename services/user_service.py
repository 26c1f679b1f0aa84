"""Create-or-fetch and lookup logic for users."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
from models.store import ExerciseStore
from schemas.requests import UserCreate
from schemas.user import UserRecord
from utils.exceptions import ConflictError, ValidationError
from utils.logger import setup_logger

logger = setup_logger(__name__)

UNKNOWN_USER = "unknown userId"


class CreateOutcome(str, Enum):
    """Outcome of a create-or-fetch call."""
    CREATED = "created"
    EXISTED = "existed"
    FAILED = "failed"


@dataclass
class CreateUserResult:
    """Result of ``UserService.create_or_fetch``.

    ``user`` is set for CREATED and EXISTED; ``error`` is set for FAILED.
    """
    outcome: CreateOutcome
    user: Optional[UserRecord] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.outcome is not CreateOutcome.FAILED


class UserService:
    """User operations over an injected store."""

    def __init__(self, store: ExerciseStore):
        self.store = store

    async def create_or_fetch(self, body: UserCreate) -> CreateUserResult:
        """Return the user with this username, creating it if needed.

        Lookup and insert are not atomic. When a concurrent request wins the
        insert, the unique index rejects ours and the winner is fetched once.
        """
        name = body.username

        try:
            existing = await self.store.find_user_by_username(name)
            if existing:
                return CreateUserResult(CreateOutcome.EXISTED, user=existing)

            try:
                created = await self.store.insert_user(name)
            except ConflictError as conflict:
                logger.info(f"Username '{name}' created concurrently, fetching existing user")
                existing = await self.store.find_user_by_username(name)
                if existing is None:
                    logger.error(f"Username '{name}' conflicted but could not be fetched")
                    return CreateUserResult(CreateOutcome.FAILED, error=conflict)
                return CreateUserResult(CreateOutcome.EXISTED, user=existing)

            return CreateUserResult(CreateOutcome.CREATED, user=created)
        except Exception as e:
            logger.error(f"Error creating user '{name}': {e}", exc_info=True)
            return CreateUserResult(CreateOutcome.FAILED, error=e)

    async def list_users(self) -> List[UserRecord]:
        return await self.store.list_users()

    async def get_user(self, user_id: str) -> UserRecord:
        """Resolve a user id.

        Raises:
            ValidationError: no user has this id.
        """
        user = await self.store.find_user_by_id(user_id)
        if user is None:
            raise ValidationError(UNKNOWN_USER)
        return user
