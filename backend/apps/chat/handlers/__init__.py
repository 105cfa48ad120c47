"""Chat handlers."""

from apps.chat.handlers.send_message import (
    SendChatMessageInput,
    send_chat_message,
    send_message_endpoint,
)

__all__ = [
    "SendChatMessageInput",
    "send_chat_message",
    "send_message_endpoint",
]
