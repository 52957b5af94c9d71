"""File storage helpers for the download and upload endpoints.

Uploads are written under a generated name so the client-supplied file name
never reaches the file system.
"""

from __future__ import annotations

import logging
import mimetypes
import shutil
import uuid
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
UPLOAD_FILE_PREFIX = "uploaded_file_"


class UploadValidationError(ValueError):
    """Raised when an uploaded file breaks the size or type rules."""


def resolve_content_type(path: str | Path) -> str:
    """Look up a content type from a file's extension.

    Unknown extensions resolve to application/octet-stream.
    """
    content_type, _ = mimetypes.guess_type(str(path), strict=False)
    return content_type or DEFAULT_CONTENT_TYPE


def validate_upload(
    size: int,
    content_type: str | None,
    max_size: int,
    allowed_content_type: str,
) -> None:
    """Check an upload against the size and content type rules.

    Raises:
        UploadValidationError: If the file is empty, larger than max_size,
            or its declared content type is not exactly allowed_content_type
    """
    if size == 0:
        raise UploadValidationError("File is empty")
    if size > max_size:
        raise UploadValidationError(f"File too large: {size} bytes (max {max_size})")
    if content_type != allowed_content_type:
        raise UploadValidationError(f"Unsupported content type: {content_type}")


def generate_upload_path(upload_dir: Path, extension: str = ".pdf") -> Path:
    """Build a unique destination path inside the upload directory."""
    return upload_dir / f"{UPLOAD_FILE_PREFIX}{uuid.uuid4()}{extension}"


def save_upload(source: BinaryIO, upload_dir: Path, extension: str = ".pdf") -> Path:
    """Copy an uploaded file stream to a new file in upload_dir.

    Blocking; call from a thread pool inside request handlers.

    Returns:
        Path of the written file
    """
    upload_dir.mkdir(parents=True, exist_ok=True)
    destination = generate_upload_path(upload_dir, extension)

    source.seek(0)
    with open(destination, "wb") as target:
        shutil.copyfileobj(source, target)

    logger.info(f"Stored upload at {destination}")
    return destination
