"""
School Management API
Signup/login, schools, classes, students and class assignments.

Architecture:
- FastAPI: HTTP routes, auth and upload dependencies
- MongoDB: users, schools, classes, students (one database)
"""

__version__ = "1.0.0"
