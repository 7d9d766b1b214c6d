import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from gamelearn.database import MongoStore, serialize_mongo
from gamelearn.dependencies import get_store
from gamelearn.errors import MissingParameter, NotFound, StoreError
from gamelearn.progression.models import UserCreate, UserRecord, XpUpdate, XpUpdateResponse
from gamelearn.progression.service import apply_xp_gain, create_or_get_user, get_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Progression"])


# ==================== PROFILE ====================

@router.get("/user/{email}")
async def get_user_endpoint(email: str, store: MongoStore = Depends(get_store)):
    """Get user profile: the whole stored document minus _id"""
    try:
        return serialize_mongo(await get_user(store, email))
    except NotFound:
        return JSONResponse(status_code=404, content={"message": "User not found"})


@router.post("/user", response_model=UserRecord)
async def create_user_endpoint(
    payload: UserCreate,
    response: Response,
    store: MongoStore = Depends(get_store)
):
    """Return the existing profile (200) or create it (201)"""
    user, created = await create_or_get_user(store, payload.email, payload.xp, payload.level)
    response.status_code = 201 if created else 200
    return user


# ==================== XP ====================

@router.post("/update-xp", response_model=XpUpdateResponse)
async def update_xp_endpoint(payload: XpUpdate, store: MongoStore = Depends(get_store)):
    """
    Grant XP from an NPC/quest source.
    Falsy fields (including xpgained == 0) are rejected as missing, which
    existing clients rely on.
    """
    if not payload.useremail or not payload.xpgained or not payload.npcID:
        logger.info("update-xp rejected, missing fields: %s", payload.model_dump())
        return JSONResponse(status_code=400, content={"error": MissingParameter.message})

    try:
        updated_user = await apply_xp_gain(store, payload.useremail, payload.xpgained, payload.npcID)
    except MissingParameter as e:
        return JSONResponse(status_code=400, content={"error": e.message})
    except StoreError:
        logger.error("Error in /update-xp for %s", payload.useremail)
        return JSONResponse(status_code=500, content={"error": "Internal server error."})

    return {
        "message": "XP and level updated successfully.",
        "updatedUser": updated_user
    }
