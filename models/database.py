"""Database connection setup."""

from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING
from config.settings import Settings
from utils.logger import setup_logger

logger = setup_logger(__name__)

USERS_COLLECTION = "users"
EXERCISES_COLLECTION = "exercises"


class Database:
    """MongoDB connection handle.

    One instance is built at startup and handed to the store; nothing in the
    application reaches for a process-wide client.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: Optional[AsyncIOMotorClient] = None

    async def connect(self) -> None:
        """Create database connection."""
        self.client = AsyncIOMotorClient(self.settings.mongo_uri)
        logger.info(f"Connected to MongoDB database '{self.settings.database_name}'")

    async def close(self) -> None:
        """Close database connection."""
        if self.client:
            self.client.close()
            self.client = None
            logger.info("Disconnected from MongoDB")

    async def init_indexes(self) -> None:
        """Create the username uniqueness index and the log lookup index."""
        await self.users.create_index([("username", ASCENDING)], unique=True)
        await self.exercises.create_index([("user_id", ASCENDING), ("date", ASCENDING)])
        logger.info("MongoDB initialized: users and exercises collections indexed")

    @property
    def database(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        if self.client is None:
            raise RuntimeError("Database is not connected")
        return self.client[self.settings.database_name]

    @property
    def users(self) -> AsyncIOMotorCollection:
        """Get users collection."""
        return self.database[USERS_COLLECTION]

    @property
    def exercises(self) -> AsyncIOMotorCollection:
        """Get exercises collection."""
        return self.database[EXERCISES_COLLECTION]
