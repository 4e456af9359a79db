"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Stored records are returned as plain serialized documents (see
services.mongo_service.serialize_doc), so only envelopes live here.
"""

from pydantic import BaseModel
from typing import Optional, List, Any
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    teacher = "teacher"
    parent = "parent"
    admin = "admin"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(BaseModel):
    email: str
    password: str

class SignupResponse(BaseModel):
    message: str
    user: dict

class LoginResponse(BaseModel):
    message: str
    user: dict
    token: str


# ============================================================
# SCHOOL SCHEMAS
# ============================================================

class SchoolCreate(BaseModel):
    name: Optional[str] = None
    photo: Optional[str] = None

class SchoolListResponse(BaseModel):
    schools: List[dict]


# ============================================================
# CLASS SCHEMAS
# ============================================================

class ClassCreate(BaseModel):
    name: Optional[str] = None


# ============================================================
# ASSIGNMENT SCHEMAS
# ============================================================

class AssignStudentRequest(BaseModel):
    # Any JSON value; malformed ids are rejected with 400 by the route
    class_id: Any = None
    student_id: Any = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str

class HealthResponse(BaseModel):
    status: str
    mongodb: str
