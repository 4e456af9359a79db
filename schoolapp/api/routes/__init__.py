"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from schoolapp.api.routes.auth_routes import router as auth_router
from schoolapp.api.routes.school_routes import router as school_router
from schoolapp.api.routes.class_routes import router as class_router
from schoolapp.api.routes.student_routes import router as student_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(school_router)
api_router.include_router(class_router)
api_router.include_router(student_router)
