import logging
from typing import List

from pymongo.errors import PyMongoError

from gamelearn.database import MongoStore, serialize_many
from gamelearn.errors import StoreError

logger = logging.getLogger(__name__)


async def list_programming_challenges(store: MongoStore) -> List[dict]:
    """Every programming challenge, _id rendered as a string"""
    try:
        challenges = await store.db.challenges.find({}).to_list(length=None)
    except PyMongoError as e:
        logger.exception("Challenge listing failed")
        raise StoreError() from e
    return serialize_many(challenges)
