"""Helpers for multipart form input."""

from typing import Optional

from fastapi import HTTPException, UploadFile, status

from cookmeet.application.dtos import IconUpload

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """HTML forms submit every field; an empty one means "not supplied"."""
    if value is None or value == "":
        return None
    return value


async def read_icon(icon: Optional[UploadFile]) -> Optional[IconUpload]:
    if icon is None or not icon.filename:
        return None
    data = await icon.read()
    if not data:
        return None
    return IconUpload(
        filename=icon.filename,
        content_type=icon.content_type or DEFAULT_CONTENT_TYPE,
        data=data,
    )


def parse_cuisine_id(raw: str) -> int:
    try:
        cuisine_id = int(raw)
    except ValueError:
        cuisine_id = 0
    if cuisine_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid cuisine ID",
        )
    return cuisine_id
