"""
Progression Engine
User profile lookup/creation and the XP grant upsert.
"""

import logging
from typing import Tuple

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from gamelearn.config import XP_UPDATE_MAX_ATTEMPTS
from gamelearn.database import BSON_INT64_MAX, MongoStore, strip_id
from gamelearn.errors import InvalidParameter, MissingParameter, NotFound, StoreError
from gamelearn.progression.levels import calculate_level

logger = logging.getLogger(__name__)

# level=0 marks a record created inside apply_xp_gain before its first recompute
UNINITIALISED_LEVEL = 0


# ==================== PROFILE ====================

async def get_user(store: MongoStore, email: str) -> dict:
    """Get user record by email (without _id)"""
    try:
        user = await store.db.users.find_one({"email": email})
    except PyMongoError as e:
        logger.exception("User lookup failed for %s", email)
        raise StoreError() from e

    if not user:
        raise NotFound("User not found")
    return strip_id(user)


async def create_or_get_user(store: MongoStore, email: str, xp: int, level: int) -> Tuple[dict, bool]:
    """
    Idempotent create.
    Returns (record, created). An existing record is returned unchanged,
    even if xp/level differ from the stored values.
    """
    if not email:
        raise MissingParameter()

    users = store.db.users
    try:
        existing = await users.find_one({"email": email})
        if existing:
            return strip_id(existing), False

        doc = {"email": email, "xp": xp, "level": level, "npcIDs": []}
        try:
            await users.insert_one(doc)
        except DuplicateKeyError:
            # lost a creation race; the winner's record stands
            existing = await users.find_one({"email": email})
            return strip_id(existing), False
    except PyMongoError as e:
        logger.exception("Profile creation failed for %s", email)
        raise StoreError() from e

    logger.info("Created user %s (xp=%s, level=%s)", email, xp, level)
    return strip_id(doc), True


# ==================== XP ====================

def coerce_xp(value) -> int:
    """Accept ints, integral floats and numeric strings; reject the rest"""
    if isinstance(value, bool):
        raise InvalidParameter("Invalid xpgained value.")
    if isinstance(value, int):
        xp = value
    elif isinstance(value, float) and value.is_integer():
        xp = int(value)
    elif isinstance(value, str):
        try:
            xp = int(value.strip())
        except ValueError:
            raise InvalidParameter("Invalid xpgained value.")
    else:
        raise InvalidParameter("Invalid xpgained value.")

    if xp < 0 or xp > BSON_INT64_MAX:
        raise InvalidParameter("Invalid xpgained value.")
    return xp


async def _ensure_user(store: MongoStore, email: str):
    await store.db.users.update_one(
        {"email": email},
        {"$setOnInsert": {"xp": 0, "level": UNINITIALISED_LEVEL, "npcIDs": []}},
        upsert=True
    )


async def apply_xp_gain(store: MongoStore, user_email: str, xp_gained, source_id) -> dict:
    """
    Add xp_gained to the user, recompute level and record source_id.

    The user is created on first grant. xp, level and the npcIDs insertion
    are written by a single find_one_and_update conditioned on the xp that
    was read, so level always matches xp; a concurrent writer forces a
    re-read, up to XP_UPDATE_MAX_ATTEMPTS times.
    """
    if not user_email or xp_gained is None or xp_gained == "" or source_id is None or source_id == "":
        raise MissingParameter()

    xp_gained = coerce_xp(xp_gained)
    source_id = str(source_id)
    users = store.db.users

    try:
        user = await users.find_one({"email": user_email})
        if not user:
            await _ensure_user(store, user_email)
            logger.info("Created user %s on first XP grant", user_email)

        for attempt in range(1, XP_UPDATE_MAX_ATTEMPTS + 1):
            if user is None:
                user = await users.find_one({"email": user_email})

            current_xp = user.get("xp")
            new_xp = (current_xp or 0) + xp_gained
            if new_xp > BSON_INT64_MAX:
                raise InvalidParameter("Invalid xpgained value.")
            new_level = calculate_level(new_xp)

            updated = await users.find_one_and_update(
                {"email": user_email, "xp": current_xp},
                {
                    "$set": {"xp": new_xp, "level": new_level},
                    "$addToSet": {"npcIDs": source_id}
                },
                return_document=ReturnDocument.AFTER
            )
            if updated:
                logger.info(
                    "XP update %s: +%s from %s -> xp=%s level=%s",
                    user_email, xp_gained, source_id, new_xp, new_level
                )
                return strip_id(updated)

            logger.warning("XP update conflict for %s (attempt %s)", user_email, attempt)
            user = None
    except PyMongoError as e:
        logger.exception("XP update failed for %s", user_email)
        raise StoreError() from e

    raise StoreError("XP update conflicted too many times.")
