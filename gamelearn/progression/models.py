from pydantic import BaseModel, Field
from typing import List, Optional, Union

from gamelearn.database import BSON_INT64_MAX
from gamelearn.progression.levels import MAX_LEVEL

# ==================== USER MODELS ====================

class UserRecord(BaseModel):
    email: str
    xp: int = 0
    level: int = 1
    npcIDs: List[str] = []


class UserCreate(BaseModel):
    email: str = Field(..., min_length=1)
    xp: int = Field(0, ge=0, le=BSON_INT64_MAX)
    # level 0 is reserved for records still being created by an XP grant
    level: int = Field(1, ge=1, le=MAX_LEVEL)


# ==================== XP MODELS ====================

class XpUpdate(BaseModel):
    """
    Body of POST /api/update-xp.
    Fields stay optional so absent values map to the missing-parameter
    error instead of a schema error.
    """
    useremail: Optional[str] = None
    xpgained: Optional[Union[int, float, str]] = None
    npcID: Optional[Union[str, int]] = None


class XpUpdateResponse(BaseModel):
    message: str
    updatedUser: UserRecord
