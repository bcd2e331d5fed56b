"""
Bill photo storage.

Uploads are streamed into a temporary file next to their final location and
only renamed into place once fully written. If anything fails on the way the
temporary file is removed, so the upload directory never holds partial files.
"""

import os
import uuid
import tempfile
from fastapi import HTTPException, UploadFile
from watertrack.config import Config
from watertrack.utils.logging_utils import get_logger

logger = get_logger("storage")

PUBLIC_PREFIX = "/uploads"
CHUNK_SIZE = 64 * 1024


def ensure_upload_dir():
    os.makedirs(Config.UPLOAD_DIR, exist_ok=True)


def save_upload(upload: UploadFile) -> str:
    """Write an uploaded image to disk and return its public path."""
    if upload.content_type and not upload.content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="Photo must be an image")

    ensure_upload_dir()
    ext = os.path.splitext(upload.filename or "")[1].lower()
    filename = f"{uuid.uuid4().hex}{ext}"
    final_path = os.path.join(Config.UPLOAD_DIR, filename)

    fd, tmp_path = tempfile.mkstemp(dir=Config.UPLOAD_DIR, suffix=".part")
    try:
        written = 0
        with os.fdopen(fd, "wb") as out:
            while True:
                chunk = upload.file.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > Config.MAX_UPLOAD_BYTES:
                    raise HTTPException(status_code=413, detail="Photo is too large")
                out.write(chunk)
        os.replace(tmp_path, final_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    logger.info(f"Stored upload {filename} ({written} bytes)")
    return f"{PUBLIC_PREFIX}/{filename}"


def delete_upload(public_path: str):
    if not public_path or not public_path.startswith(f"{PUBLIC_PREFIX}/"):
        return

    filename = os.path.basename(public_path)
    path = os.path.join(Config.UPLOAD_DIR, filename)
    try:
        os.remove(path)
    except FileNotFoundError:
        logger.warning(f"Photo {filename} was already gone")
