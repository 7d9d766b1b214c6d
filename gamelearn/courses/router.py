import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gamelearn.courses.models import CourseCreate
from gamelearn.courses.service import create_course
from gamelearn.database import MongoStore
from gamelearn.dependencies import get_store
from gamelearn.errors import NotFound, StoreError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Course Management"])


@router.post("/course", status_code=201)
async def create_course_endpoint(payload: CourseCreate, store: MongoStore = Depends(get_store)):
    """Create new course for an existing user"""
    try:
        course = await create_course(store, payload.email, payload.title, payload.topics)
    except NotFound:
        return JSONResponse(status_code=404, content={"error": "No user found"})
    except StoreError:
        return JSONResponse(status_code=500, content={"error": "Something went wrong"})

    return {"message": "Course created", "course": course}
