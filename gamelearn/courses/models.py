from pydantic import BaseModel, Field
from typing import List

# ==================== COURSE MODELS ====================

class CourseCreate(BaseModel):
    email: str = Field(..., min_length=1)  # owner
    title: str = Field(..., min_length=1)
    topics: List[str] = []
