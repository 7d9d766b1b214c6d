import logging
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from gamelearn.config import MONGO_DB_NAME, MONGO_SERVER_SELECTION_TIMEOUT_MS, MONGO_URL
from gamelearn.errors import StoreUnavailable

logger = logging.getLogger(__name__)

# largest integer BSON can store (int64)
BSON_INT64_MAX = 2**63 - 1


# ==================== SERIALIZATION ====================

def serialize_mongo(doc: dict) -> dict:
    """Render ObjectId values as strings so the document is JSON safe"""
    return {k: str(v) if isinstance(v, ObjectId) else v for k, v in doc.items()}


def serialize_many(docs: list[dict]) -> list[dict]:
    return [serialize_mongo(doc) for doc in docs]


def strip_id(doc: dict) -> dict:
    """Drop the internal Mongo identifier from a record"""
    return {k: v for k, v in doc.items() if k != "_id"}


# ==================== STORE HANDLE ====================

class MongoStore:
    """
    Process-wide handle on the MongoDB database.

    Constructed once in create_app(), connected on startup and injected into
    handlers. Tests pass a prebuilt client (e.g. mongomock-motor).
    """

    def __init__(self, url: str = MONGO_URL, db_name: str = MONGO_DB_NAME, client=None):
        self.url = url
        self.db_name = db_name
        self._client = client
        self._db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self):
        if self._db is not None:
            return
        if self._client is None:
            self._client = AsyncIOMotorClient(
                self.url,
                serverSelectionTimeoutMS=MONGO_SERVER_SELECTION_TIMEOUT_MS,
            )
        self._db = self._client[self.db_name]
        try:
            await self.create_indexes()
        except PyMongoError:
            self._db = None
            logger.exception("Could not initialise database %s", self.db_name)
            raise StoreUnavailable()
        logger.info("Connected to database %s", self.db_name)

    def is_ready(self) -> bool:
        return self._db is not None

    @property
    def db(self) -> AsyncIOMotorDatabase:
        if self._db is None:
            raise StoreUnavailable()
        return self._db

    async def create_indexes(self):
        """Create MongoDB indexes"""
        await self._db.users.create_index("email", unique=True)
        await self._db.courses.create_index("user")
        await self._db.courses.create_index("createdAt")

    async def close(self):
        if self._client is not None:
            self._client.close()
        self._db = None
        logger.info("Database connection closed")
