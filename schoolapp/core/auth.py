"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt (cost factor 10)
- JWT token creation/verification with one configurable secret
- FastAPI dependency for protected routes

The token travels as the raw value of the Authorization header,
without a "Bearer " prefix.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader

from schoolapp.core.config import Settings

logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)

# Raw token extractor (whole header value is the token)
token_header = APIKeyHeader(name="Authorization", auto_error=False)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify password against hash. A missing or unreadable hash never matches."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def create_access_token(user_id: str, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token carrying the user id as subject."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode = {"sub": str(user_id), "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings) -> dict:
    """Decode and verify JWT token. Raises JWTError on bad signature or expiry."""
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])


def get_settings_from_app(request: Request) -> Settings:
    return request.app.state.settings


async def get_current_user(
    token: Optional[str] = Depends(token_header),
    settings: Settings = Depends(get_settings_from_app),
) -> dict:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @router.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user
    """
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    logger.debug("Received token (%d chars)", len(token))

    try:
        payload = decode_token(token, settings)
    except JWTError as e:
        logger.info("Rejected token: %s", e)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    return {"user_id": user_id}
