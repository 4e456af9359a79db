"""
School Routes

POST /schools - Create school
GET /my-schools - Get schools visible to the current user
"""

from typing import Optional
from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException
from pymongo.database import Database

from schoolapp.db.mongodb import get_db
from schoolapp.core.auth import get_current_user
from schoolapp.services.mongo_service import SchoolService, UserService, serialize_doc, serialize_docs
from schoolapp.schemas.schemas import SchoolCreate, SchoolListResponse, UserRole

router = APIRouter(tags=["Schools"])


@router.post("/schools")
async def create_school(data: Optional[SchoolCreate] = None, db: Database = Depends(get_db)):
    """Create a school. No authentication, no validation."""
    data = data or SchoolCreate()
    school = SchoolService(db).insert(name=data.name, photo=data.photo)
    return serialize_doc(school)


@router.get("/my-schools", response_model=SchoolListResponse)
async def my_schools(user: dict = Depends(get_current_user), db: Database = Depends(get_db)):
    """
    Get schools based on the user's role.

    Students and teachers are filtered by the user's "classes" field.
    User records have no such field, so that filter always matches
    nothing and these roles get an empty list. Other roles get every school.
    """
    user_id = user["user_id"]
    found = UserService(db).get_by_id(user_id) if ObjectId.is_valid(user_id) else None
    if not found:
        raise HTTPException(status_code=404, detail="User not found")

    schools = SchoolService(db)
    if found.get("role") in (UserRole.student.value, UserRole.teacher.value):
        results = schools.find_by_ids(found.get("classes", []))
    else:
        results = schools.find_all()

    return {"schools": serialize_docs(results)}
