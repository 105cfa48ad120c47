"""POST /technicians/{technician_id}/avatar - Upload a profile picture."""

import logging
from typing import Any

from fastapi import Depends, File, Form, UploadFile
from pydantic import Field, ValidationError

from db import StorageService, timestamped_path
from dependencies import get_storage_service
from models import Attachment, CamelModel
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)


class UploadAvatarInput(CamelModel):
    technician_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)
    file: Attachment


async def upload_avatar(
    payload: UploadAvatarInput | dict[str, Any],
    storage: StorageService,
) -> ActionResult:
    """Store the image publicly and return ``{"url": ...}``.

    The caller writes the URL to the technician's ``avatarUrl``.
    """
    try:
        payload = UploadAvatarInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        destination = timestamped_path(
            "avatars", payload.technician_id, payload.file.filename
        )
        url = await storage.upload_public(
            destination, payload.file.data, payload.file.content_type
        )
        return ActionResult(data={"url": url})

    except Exception as e:
        logger.exception("Error uploading avatar for %s", payload.technician_id)
        return action_failure("Failed to upload avatar", e)


async def upload_avatar_endpoint(
    technician_id: str,
    app_id: str = Form(..., alias="appId"),
    file: UploadFile = File(...),
    storage: StorageService = Depends(get_storage_service),
) -> ActionResult:
    """Multipart form variant of upload_avatar."""
    return await upload_avatar(
        {
            "technician_id": technician_id,
            "app_id": app_id,
            "file": Attachment(
                filename=file.filename or "avatar",
                content_type=file.content_type,
                data=await file.read(),
            ),
        },
        storage=storage,
    )
