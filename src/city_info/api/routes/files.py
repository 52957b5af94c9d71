"""File transfer routes.

- GET /{file_id} serves the single configured demo file; `file_id` is not
  used for lookup.
- POST / accepts one PDF of at most 20 MiB and stores it under a generated
  name.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, File, HTTPException, Response, UploadFile, status
from fastapi.responses import FileResponse
from starlette.concurrency import run_in_threadpool

from city_info.api.versioning import copy_version_headers
from city_info.config import get_settings
from city_info.files import (
    UploadValidationError,
    resolve_content_type,
    save_upload,
    validate_upload,
)

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_SUCCESS_MESSAGE = "Your file has been uploaded successfully."
UPLOAD_REJECTED_MESSAGE = "No file or invalid input"


@router.get(
    "/{file_id}",
    response_class=FileResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "File not found"}},
)
async def get_file(file_id: str, response: Response) -> Response:
    """Download the demo file."""
    path = get_settings().download_file_path

    if not path.is_file():
        logger.warning(f"Download requested for {file_id!r} but {path} is missing")
        return copy_version_headers(
            response, Response(status_code=status.HTTP_404_NOT_FOUND)
        )

    file_response = FileResponse(
        path,
        media_type=resolve_content_type(path),
        filename=path.name,
    )
    return copy_version_headers(response, file_response)


@router.post("", response_model=str)
async def create_file(file: UploadFile | None = File(default=None)) -> str:
    """Upload a PDF file."""
    settings = get_settings()

    if file is None:
        logger.info("Rejected upload without a file part")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=UPLOAD_REJECTED_MESSAGE,
        )

    size = file.size
    if size is None:
        size = len(await file.read())

    try:
        validate_upload(
            size,
            file.content_type,
            max_size=settings.max_upload_size_bytes,
            allowed_content_type=settings.allowed_upload_content_type,
        )
    except UploadValidationError as e:
        logger.info(f"Rejected upload {file.filename!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=UPLOAD_REJECTED_MESSAGE,
        )

    destination: Path = await run_in_threadpool(save_upload, file.file, settings.upload_dir)
    logger.info(f"Accepted upload {file.filename!r} ({size} bytes) as {destination.name}")

    return UPLOAD_SUCCESS_MESSAGE
