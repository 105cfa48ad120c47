"""Firestore service for FleetSync documents.

App-scoped data lives under ``artifacts/{app_id}/public/data/{collection}``
(jobs, technicians, chat messages, parts, skills). ``users`` and
``companies`` are top-level collections.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Literal

from google.cloud.firestore_v1 import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter
from google.cloud.firestore_v1.query import Query
from google.oauth2 import service_account

from config import get_settings
from db.firebase import get_firebase_app, load_firebase_credentials

logger = logging.getLogger(__name__)

USERS = "users"
COMPANIES = "companies"

# App-scoped collections
JOBS = "jobs"
TECHNICIANS = "technicians"
CHAT_MESSAGES = "chatMessages"
PARTS = "parts"
SKILLS = "skills"
PROFILE_CHANGE_REQUESTS = "profileChangeRequests"
DISPATCHER_FEEDBACK = "dispatcherFeedback"

# Firestore caps a batch at 500 writes
MAX_BATCH_WRITES = 500


def app_collection(app_id: str, name: str) -> str:
    """Path of an app-scoped collection."""
    return f"artifacts/{app_id}/public/data/{name}"


@dataclass
class BatchWrite:
    """A single write inside a batch commit.

    ``doc_id`` may be None for ``set`` to let Firestore pick an id.
    """

    op: Literal["set", "update", "delete"]
    collection: str
    doc_id: str | None
    data: dict[str, Any] = field(default_factory=dict)
    merge: bool = False


class FirestoreService:
    """Async document access on top of the Firestore client."""

    _initialized: bool = False
    _db: AsyncClient | None = None

    def __init__(self) -> None:
        """Initialize Firestore client (singleton pattern)."""
        if FirestoreService._initialized:
            self.db = FirestoreService._db
            return

        settings = get_settings()

        try:
            creds_dict = load_firebase_credentials(settings.firebase_credentials)
            get_firebase_app()

            gcp_credentials = service_account.Credentials.from_service_account_info(
                creds_dict
            )

            FirestoreService._db = AsyncClient(
                project=creds_dict.get("project_id"),
                credentials=gcp_credentials,
            )
            self.db = FirestoreService._db

            FirestoreService._initialized = True
            logger.info("Firestore client initialized successfully")
        except Exception as e:
            logger.error("Failed to initialize Firestore: %s", e)
            raise

    # --- Single documents ---

    async def get_document(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Fetch a document as a dict with its ``id``, or None if missing."""
        doc = await self.db.collection(collection).document(doc_id).get()
        if not doc.exists:
            return None
        data = doc.to_dict() or {}
        data["id"] = doc.id
        return data

    async def add_document(self, collection: str, data: dict[str, Any]) -> str:
        """Create a document with a generated id and return the id."""
        doc_ref = self.db.collection(collection).document()
        await doc_ref.set(data)
        logger.debug("Added document %s/%s", collection, doc_ref.id)
        return doc_ref.id

    async def set_document(
        self,
        collection: str,
        doc_id: str,
        data: dict[str, Any],
        merge: bool = False,
    ) -> None:
        """Create or overwrite a document."""
        await self.db.collection(collection).document(doc_id).set(data, merge=merge)

    async def update_document(
        self, collection: str, doc_id: str, data: dict[str, Any]
    ) -> None:
        """Update fields of an existing document (fails if it does not exist)."""
        await self.db.collection(collection).document(doc_id).update(data)

    async def delete_document(self, collection: str, doc_id: str) -> None:
        """Delete a document."""
        await self.db.collection(collection).document(doc_id).delete()

    # --- Queries ---

    async def query_documents(
        self,
        collection: str,
        filters: list[tuple[str, str, Any]] | None = None,
        order_by: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Run a query and return matching documents with their ids."""
        query: Any = self.db.collection(collection)
        for field_path, op, value in filters or []:
            query = query.where(filter=FieldFilter(field_path, op, value))
        if order_by:
            query = query.order_by(order_by, direction=Query.ASCENDING)
        if limit:
            query = query.limit(limit)

        docs = await query.get()
        results = []
        for doc in docs:
            data = doc.to_dict() or {}
            data["id"] = doc.id
            results.append(data)
        return results

    # --- Batches ---

    def new_document_id(self, collection: str) -> str:
        """Reserve a new document id without writing."""
        return self.db.collection(collection).document().id

    async def commit_batch(self, writes: list[BatchWrite]) -> None:
        """Commit writes atomically as a single batch.

        Raises:
            ValueError: More than MAX_BATCH_WRITES writes; nothing is written.
        """
        if len(writes) > MAX_BATCH_WRITES:
            raise ValueError(
                f"A batch holds at most {MAX_BATCH_WRITES} writes, got {len(writes)}"
            )

        batch = self.db.batch()
        for write in writes:
            collection_ref = self.db.collection(write.collection)
            doc_ref = (
                collection_ref.document(write.doc_id)
                if write.doc_id
                else collection_ref.document()
            )
            if write.op == "set":
                batch.set(doc_ref, write.data, merge=write.merge)
            elif write.op == "update":
                batch.update(doc_ref, write.data)
            else:
                batch.delete(doc_ref)

        if writes:
            await batch.commit()
        logger.debug("Committed batch of %d writes", len(writes))

    async def health_check(self) -> dict[str, Any]:
        """Check Firestore connection health."""
        start = time.time()
        try:
            test_ref = self.db.collection("_health_check").document("test")
            await test_ref.set({"timestamp": datetime.now(UTC)})
            await test_ref.get()

            latency = (time.time() - start) * 1000
            return {"status": "healthy", "latency_ms": round(latency, 2)}
        except Exception as e:
            return {"status": "unhealthy", "error": str(e)}
