"""
Student Routes

POST /students - Create student (multipart, optional photo)
GET /students - Get all students
POST /assign-student-to-class - Link a student and a class
GET /students-in-all-classes - Students assigned to every class
GET /classmates/{student_id} - Students sharing a class with a student
"""

import logging
from typing import Optional
from bson import ObjectId
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pymongo.database import Database

from schoolapp.db.mongodb import get_db
from schoolapp.core.auth import get_current_user
from schoolapp.utils.file_upload import get_upload_dir, save_upload
from schoolapp.services.mongo_service import ClassService, StudentService, serialize_doc, serialize_docs
from schoolapp.schemas.schemas import AssignStudentRequest, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Students"])


@router.post("/students")
async def create_student(
    name: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
    upload_dir: str = Depends(get_upload_dir),
):
    """Create a student. Photo is optional; only its stored path is saved."""
    photo_path = await save_upload(photo, upload_dir)
    student = StudentService(db).insert(name=name, photo=photo_path)
    return serialize_doc(student)


@router.get("/students")
async def list_students(user: dict = Depends(get_current_user), db: Database = Depends(get_db)):
    """Get all students (unfiltered, no pagination)."""
    return serialize_docs(StudentService(db).find_all())


@router.post("/assign-student-to-class", response_model=MessageResponse)
async def assign_student_to_class(
    data: Optional[AssignStudentRequest] = None,
    user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
):
    """
    Assign a student to a class.

    Appends the student id to the class and the class id to the student
    as two separate writes. Not idempotent: assigning the same pair again
    adds duplicate entries to both lists.
    """
    data = data or AssignStudentRequest()
    if not ObjectId.is_valid(data.class_id) or not ObjectId.is_valid(data.student_id):
        raise HTTPException(status_code=400, detail="Invalid class or student ID")

    classes = ClassService(db)
    students = StudentService(db)

    found_class = classes.get_by_id(data.class_id)
    found_student = students.get_by_id(data.student_id)
    if not found_class or not found_student:
        raise HTTPException(status_code=404, detail="Class or student not found")

    classes.push_student(found_class["_id"], found_student["_id"])
    students.push_class(found_student["_id"], found_class["_id"])
    logger.info("Assigned student %s to class %s", found_student["_id"], found_class["_id"])

    return MessageResponse(message="Student assigned to class successfully")


@router.get("/students-in-all-classes")
async def students_in_all_classes(user: dict = Depends(get_current_user), db: Database = Depends(get_db)):
    """Students whose class list covers every existing class. Empty if there are no classes."""
    class_ids = [c["_id"] for c in ClassService(db).find_all()]
    return serialize_docs(StudentService(db).find_in_all_classes(class_ids))


@router.get("/classmates/{student_id}")
async def classmates(student_id: str, user: dict = Depends(get_current_user), db: Database = Depends(get_db)):
    """Other students that share at least one class with the given student."""
    if not ObjectId.is_valid(student_id):
        raise HTTPException(status_code=400, detail="Invalid student ID")

    students = StudentService(db)
    target = students.get_by_id(student_id)
    if not target:
        raise HTTPException(status_code=404, detail="Student not found")

    return serialize_docs(students.find_classmates(target))
