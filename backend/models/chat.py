"""Chat message document schema."""

from datetime import datetime

from models.common import CamelModel


class ChatMessage(CamelModel):
    """A message between dispatcher and technician about a job.

    Path: artifacts/{app_id}/public/data/chatMessages/{message_id}
    """

    id: str = ""
    job_id: str
    company_id: str
    sender_id: str
    sender_name: str
    receiver_id: str
    text: str
    image_url: str | None = None
    timestamp: datetime | None = None
    is_read: bool = False
