"""
File Upload Utility - store uploaded photos on local disk.

Files are written to the configured upload directory under a random
32-character hex name (no extension). No content-type or size checks.
Only the stored path is kept in the database.
"""

import logging
import os
import uuid
from typing import Optional
from fastapi import Request, UploadFile

logger = logging.getLogger(__name__)


def get_upload_dir(request: Request) -> str:
    """Dependency - upload directory from app settings."""
    return request.app.state.settings.upload_dir


def generate_filename() -> str:
    return uuid.uuid4().hex


async def save_upload(file: Optional[UploadFile], upload_dir: str) -> Optional[str]:
    """
    Save an uploaded file.

    Args:
        file: FastAPI UploadFile, or None when the field was not sent
        upload_dir: Directory to write into (created if missing)

    Returns:
        Stored file path, or None if nothing was uploaded
    """
    if file is None or not file.filename:
        return None

    os.makedirs(upload_dir, exist_ok=True)
    dest = os.path.join(upload_dir, generate_filename())

    content = await file.read()
    with open(dest, "wb") as f:
        f.write(content)

    logger.info("Stored upload %r at %s (%d bytes)", file.filename, dest, len(content))
    return dest
