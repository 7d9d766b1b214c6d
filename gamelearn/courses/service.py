import logging
from datetime import datetime, timezone
from typing import List

from pymongo.errors import PyMongoError

from gamelearn.database import MongoStore, serialize_mongo
from gamelearn.errors import NotFound, StoreError

logger = logging.getLogger(__name__)

# ==================== COURSE CRUD ====================

async def create_course(store: MongoStore, email: str, title: str, topics: List[str]) -> dict:
    """
    Create a course owned by an existing user.
    The course references the owner's _id, not the email.
    """
    db = store.db
    try:
        owner = await db.users.find_one({"email": email})
        if not owner:
            raise NotFound("No user found")

        course = {
            "title": title,
            "topics": topics,
            "createdAt": datetime.now(timezone.utc),
            "user": owner["_id"]
        }
        await db.courses.insert_one(course)
    except PyMongoError as e:
        logger.exception("Course creation failed for %s", email)
        raise StoreError("Something went wrong") from e

    logger.info("Course %r created for %s", title, email)
    return serialize_mongo(course)
