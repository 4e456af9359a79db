"""
Schemas module - Request/Response schemas for API endpoints.
"""

from schoolapp.schemas.schemas import (
    UserRole, LoginRequest, SignupResponse, LoginResponse, SchoolCreate,
    SchoolListResponse, ClassCreate, AssignStudentRequest, MessageResponse,
    HealthResponse
)
