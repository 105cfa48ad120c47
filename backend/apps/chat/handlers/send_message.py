"""POST /chat/messages - Send a chat message about a job."""

import logging
from typing import Any

from fastapi import Depends, File, Form, UploadFile
from google.cloud.firestore import SERVER_TIMESTAMP
from pydantic import Field, ValidationError

from db import (
    CHAT_MESSAGES,
    FirestoreService,
    StorageService,
    app_collection,
    timestamped_path,
)
from dependencies import get_firestore_service, get_storage_service
from models import Attachment, CamelModel, ChatMessage
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)


# --- Request Schemas ---


class SendChatMessageInput(CamelModel):
    job_id: str
    company_id: str
    sender_id: str
    sender_name: str
    receiver_id: str
    text: str
    app_id: str = Field(..., min_length=1)
    attachment: Attachment | None = None


# --- Handler ---


async def send_chat_message(
    payload: SendChatMessageInput | dict[str, Any],
    storage: StorageService,
    firestore: FirestoreService,
) -> ActionResult:
    """Store a chat message, uploading the optional image attachment first."""
    try:
        payload = SendChatMessageInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        image_url = None
        if payload.attachment:
            destination = timestamped_path(
                "chat-attachments", payload.job_id, payload.attachment.filename
            )
            image_url = await storage.upload_public(
                destination,
                payload.attachment.data,
                payload.attachment.content_type,
            )

        message = ChatMessage(
            **payload.model_dump(exclude={"app_id", "attachment"}),
            image_url=image_url,
        ).to_document(exclude={"id"})
        message["timestamp"] = SERVER_TIMESTAMP
        message_id = await firestore.add_document(
            app_collection(payload.app_id, CHAT_MESSAGES), message
        )
        logger.info("Chat message %s sent for job %s", message_id, payload.job_id)
        return ActionResult()

    except Exception as e:
        logger.exception("Error sending chat message for job %s", payload.job_id)
        return action_failure("Failed to send message", e)


# --- Endpoint ---


async def send_message_endpoint(
    job_id: str = Form(..., alias="jobId"),
    company_id: str = Form(..., alias="companyId"),
    sender_id: str = Form(..., alias="senderId"),
    sender_name: str = Form(..., alias="senderName"),
    receiver_id: str = Form(..., alias="receiverId"),
    text: str = Form(""),
    app_id: str = Form(..., alias="appId"),
    attachment: UploadFile | None = File(None),
    storage: StorageService = Depends(get_storage_service),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Multipart form variant of send_chat_message."""
    upload = None
    if attachment is not None and attachment.filename:
        upload = Attachment(
            filename=attachment.filename,
            content_type=attachment.content_type,
            data=await attachment.read(),
        )

    return await send_chat_message(
        {
            "job_id": job_id,
            "company_id": company_id,
            "sender_id": sender_id,
            "sender_name": sender_name,
            "receiver_id": receiver_id,
            "text": text,
            "app_id": app_id,
            "attachment": upload,
        },
        storage=storage,
        firestore=firestore,
    )
