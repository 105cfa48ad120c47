"""Chat routes - registers all chat endpoints."""

from fastapi import APIRouter

from apps.chat.handlers import send_message_endpoint
from responses import ActionResult

router = APIRouter(prefix="/chat", tags=["Chat"])

# POST /chat/messages - Send message (multipart, optional attachment)
router.post("/messages", response_model=ActionResult)(send_message_endpoint)
