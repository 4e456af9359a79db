"""
Class Routes

POST /classes - Create class
GET /classes/{class_id} - Get class by id
"""

from typing import Optional
from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException
from pymongo.database import Database

from schoolapp.db.mongodb import get_db
from schoolapp.core.auth import get_current_user
from schoolapp.services.mongo_service import ClassService, serialize_doc
from schoolapp.schemas.schemas import ClassCreate

router = APIRouter(prefix="/classes", tags=["Classes"])


@router.post("")
async def create_class(data: Optional[ClassCreate] = None, user: dict = Depends(get_current_user), db: Database = Depends(get_db)):
    """Create a class with only a name; students are assigned later."""
    data = data or ClassCreate()
    new_class = ClassService(db).insert(name=data.name)
    return serialize_doc(new_class)


@router.get("/{class_id}")
async def get_class(class_id: str, user: dict = Depends(get_current_user), db: Database = Depends(get_db)):
    """Get a class by id. 400 for a malformed id, 404 if it does not exist."""
    if not ObjectId.is_valid(class_id):
        raise HTTPException(status_code=400, detail="Invalid class ID")

    found = ClassService(db).get_by_id(class_id)
    if not found:
        raise HTTPException(status_code=404, detail="Class not found")

    return serialize_doc(found)
