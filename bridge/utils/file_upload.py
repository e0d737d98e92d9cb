"""
File Upload Utility - describe uploaded files for organization suggestions.

Only metadata is kept (name, content type, size); file contents are read
to measure them and then discarded.

Max file size: settings.max_upload_mb (default 5MB)
"""

from typing import List
from fastapi import UploadFile, HTTPException

from bridge.core.config import get_settings
from bridge.schemas.schemas import UploadedFileInfo

SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension."""
    if '.' not in filename:
        return ''
    return '.' + filename.rsplit('.', 1)[1].lower()


def format_file_size(size: int) -> str:
    """Human readable size, e.g. 1536 -> '1.5 KB'."""
    if size <= 0:
        return "0 Bytes"
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{round(value, 2):g} {SIZE_UNITS[unit]}"


async def describe_upload(file: UploadFile) -> UploadedFileInfo:
    """
    Read an uploaded file and return its metadata.

    Raises:
        HTTPException on validation errors
    """
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    max_mb = get_settings().max_upload_mb
    content = await file.read()

    if len(content) > max_mb * 1024 * 1024:
        raise HTTPException(
            status_code=413,
            detail=f"File '{file.filename}' too large. Maximum size: {max_mb}MB"
        )

    return UploadedFileInfo(
        filename=file.filename,
        content_type=file.content_type or "",
        size=len(content),
        size_label=format_file_size(len(content))
    )


async def describe_uploads(files: List[UploadFile]) -> List[UploadedFileInfo]:
    if not files:
        raise HTTPException(status_code=400, detail="No files uploaded")
    return [await describe_upload(f) for f in files]
