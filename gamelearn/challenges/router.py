from fastapi import APIRouter, Depends

from gamelearn.challenges.service import list_programming_challenges
from gamelearn.database import MongoStore
from gamelearn.dependencies import get_store

router = APIRouter(prefix="/challenges", tags=["Challenges"])


@router.get("/programming")
async def list_programming_challenges_endpoint(store: MongoStore = Depends(get_store)):
    return await list_programming_challenges(store)
