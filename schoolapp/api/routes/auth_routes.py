"""
Authentication Routes

POST /api/signup - Register new user (multipart, optional photo)
POST /api/login - Login and get JWT token
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from pymongo.database import Database

from schoolapp.db.mongodb import get_db
from schoolapp.core.auth import hash_password, verify_password, create_access_token, get_settings_from_app
from schoolapp.core.config import Settings
from schoolapp.services.mongo_service import UserService, serialize_doc
from schoolapp.utils.file_upload import get_upload_dir, save_upload
from schoolapp.schemas.schemas import LoginRequest, LoginResponse, SignupResponse, UserRole

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Authentication"])


@router.post("/signup", response_model=SignupResponse)
async def signup(
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    password: str = Form(...),
    parent_invite_code: Optional[str] = Form(None, alias="parentInviteCode"),
    teacher_invite_code: Optional[str] = Form(None, alias="teacherInviteCode"),
    photo: Optional[UploadFile] = File(None),
    db: Database = Depends(get_db),
    upload_dir: str = Depends(get_upload_dir),
):
    """
    Register a new user account.

    Every account is created with role "student"; the invite codes are
    stored as given and not interpreted.
    The response echoes the stored record, password hash included.
    """
    photo_path = await save_upload(photo, upload_dir)

    user = UserService(db).insert(
        name=name,
        email=email,
        password_hash=hash_password(password),
        photo=photo_path,
        parent_invite_code=parent_invite_code,
        teacher_invite_code=teacher_invite_code,
        role=UserRole.student.value,
    )
    logger.info("Created user %s", user["_id"])

    return {"message": "User created successfully", "user": serialize_doc(user)}


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings_from_app),
):
    """
    Login and receive JWT access token.

    Send the token back as the raw Authorization header value.
    """
    user = UserService(db).find_by_email(request.email)

    if not user or not verify_password(request.password, user.get("password")):
        logger.warning("Failed login for %r", request.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token = create_access_token(str(user["_id"]), settings)

    user_out = serialize_doc(user)
    user_out.pop("password", None)
    logger.info("User %s logged in", user_out["_id"])

    return {"message": "Login successful", "user": user_out, "token": token}
