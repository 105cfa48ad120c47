"""Cloud Storage uploads for chat attachments and avatars.

The google-cloud-storage client is blocking, so uploads run in a worker
thread via asyncio.to_thread.
"""

import asyncio
import logging
import time

from firebase_admin import storage

from db.firebase import get_firebase_app

logger = logging.getLogger(__name__)


def timestamped_path(prefix: str, owner_id: str, filename: str) -> str:
    """Build ``{prefix}/{owner_id}/{epoch_ms}-{filename}``."""
    return f"{prefix}/{owner_id}/{int(time.time() * 1000)}-{filename}"


class StorageService:
    """Uploads files and returns their permanent public URLs."""

    def __init__(self, bucket=None) -> None:
        self.bucket = bucket or storage.bucket(app=get_firebase_app())

    def _upload_public_sync(
        self, destination: str, data: bytes, content_type: str | None
    ) -> str:
        blob = self.bucket.blob(destination)
        blob.upload_from_string(data, content_type=content_type)
        # Public read gives a permanent URL to store in Firestore
        blob.make_public()
        return blob.public_url

    async def upload_public(
        self, destination: str, data: bytes, content_type: str | None = None
    ) -> str:
        """Upload bytes to ``destination`` and return the public URL."""
        url = await asyncio.to_thread(
            self._upload_public_sync, destination, data, content_type
        )
        logger.info("Uploaded %d bytes to %s", len(data), destination)
        return url
