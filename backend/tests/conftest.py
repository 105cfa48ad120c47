"""Pytest configuration and fixtures for FleetSync AI tests."""

import os
import sys

# Set required env vars BEFORE any imports that might trigger Settings
os.environ.setdefault("ANTHROPIC_API_KEY", "test-anthropic-key")
os.environ.setdefault(
    "FIREBASE_CREDENTIALS", '{"type":"service_account","project_id":"test"}'
)
os.environ.setdefault("SUPER_ADMIN_EMAIL", "owner@fleetsync.dev")

import itertools
from collections import defaultdict
from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock

import pytest

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from google.cloud.firestore import DELETE_FIELD, SERVER_TIMESTAMP, ArrayUnion  # noqa: E402

from db import MAX_BATCH_WRITES, BatchWrite  # noqa: E402
from llm import BaseLLMService  # noqa: E402

APP_ID = "test-app"
COMPANY_ID = "company-1"


class FakeFirestore:
    """In-memory stand-in for FirestoreService.

    Server timestamps resolve to the current UTC time and ArrayUnion
    appends missing values, so stored documents look like real reads.
    """

    def __init__(self) -> None:
        self.collections: dict[str, dict[str, dict[str, Any]]] = defaultdict(dict)
        self.batches: list[list[BatchWrite]] = []
        self._ids = itertools.count(1)

    # --- Test helpers ---

    def seed(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        self.collections[collection][doc_id] = dict(data)

    def doc(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        return self.collections[collection].get(doc_id)

    def docs(self, collection: str) -> list[dict[str, Any]]:
        return list(self.collections[collection].values())

    def _next_id(self) -> str:
        return f"doc-{next(self._ids)}"

    @staticmethod
    def _apply(existing: dict[str, Any], data: dict[str, Any]) -> dict[str, Any]:
        result = dict(existing)
        for key, value in data.items():
            if value is SERVER_TIMESTAMP:
                result[key] = datetime.now(UTC)
            elif value is DELETE_FIELD:
                result.pop(key, None)
            elif isinstance(value, ArrayUnion):
                current = list(result.get(key) or [])
                current.extend(v for v in value.values if v not in current)
                result[key] = current
            else:
                result[key] = value
        return result

    # --- FirestoreService interface ---

    async def get_document(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        data = self.collections[collection].get(doc_id)
        if data is None:
            return None
        return dict(data) | {"id": doc_id}

    async def add_document(self, collection: str, data: dict[str, Any]) -> str:
        doc_id = self._next_id()
        self.collections[collection][doc_id] = self._apply({}, data)
        return doc_id

    async def set_document(
        self,
        collection: str,
        doc_id: str,
        data: dict[str, Any],
        merge: bool = False,
    ) -> None:
        existing = self.collections[collection].get(doc_id, {}) if merge else {}
        self.collections[collection][doc_id] = self._apply(existing, data)

    async def update_document(
        self, collection: str, doc_id: str, data: dict[str, Any]
    ) -> None:
        if doc_id not in self.collections[collection]:
            raise LookupError(f"No document to update: {collection}/{doc_id}")
        self.collections[collection][doc_id] = self._apply(
            self.collections[collection][doc_id], data
        )

    async def delete_document(self, collection: str, doc_id: str) -> None:
        self.collections[collection].pop(doc_id, None)

    @staticmethod
    def _matches(actual: Any, op: str, value: Any) -> bool:
        if op == "==":
            return actual == value
        if op == "in":
            return actual in value
        raise NotImplementedError(f"Unsupported operator: {op}")

    async def query_documents(
        self,
        collection: str,
        filters: list[tuple[str, str, Any]] | None = None,
        order_by: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        results = []
        for doc_id, data in self.collections[collection].items():
            if all(
                self._matches(data.get(field), op, value)
                for field, op, value in filters or []
            ):
                results.append(dict(data) | {"id": doc_id})
        if order_by:
            results.sort(key=lambda d: d.get(order_by))
        if limit:
            results = results[:limit]
        return results

    def new_document_id(self, collection: str) -> str:
        return self._next_id()

    async def commit_batch(self, writes: list[BatchWrite]) -> None:
        if len(writes) > MAX_BATCH_WRITES:
            raise ValueError(
                f"A batch holds at most {MAX_BATCH_WRITES} writes, got {len(writes)}"
            )
        self.batches.append(list(writes))
        # Documents are replaced, never mutated, so a shallow copy restores them
        snapshot = {name: dict(docs) for name, docs in self.collections.items()}
        try:
            for write in writes:
                if write.op == "set":
                    await self.set_document(
                        write.collection,
                        write.doc_id or self._next_id(),
                        write.data,
                        merge=write.merge,
                    )
                elif write.op == "update":
                    await self.update_document(
                        write.collection, write.doc_id, write.data
                    )
                else:
                    await self.delete_document(write.collection, write.doc_id)
        except Exception:
            self.collections = defaultdict(dict, snapshot)
            raise

    async def health_check(self) -> dict[str, Any]:
        return {"status": "healthy", "latency_ms": 1.0}


class FakeStorage:
    """Records uploads and hands back predictable public URLs."""

    def __init__(self) -> None:
        self.uploads: list[tuple[str, bytes, str | None]] = []

    async def upload_public(
        self, destination: str, data: bytes, content_type: str | None = None
    ) -> str:
        self.uploads.append((destination, data, content_type))
        return f"https://storage.test/{destination}"


class FakeAuth:
    """Custom claims kept in a dict; ``valid-token`` belongs to ``user-1``."""

    def __init__(self) -> None:
        self.claims: dict[str, dict[str, Any]] = {}
        self.set_calls = 0

    async def get_custom_claims(self, uid: str) -> dict[str, Any]:
        return dict(self.claims.get(uid, {}))

    async def set_custom_claims(self, uid: str, claims: dict[str, Any]) -> None:
        self.set_calls += 1
        self.claims[uid] = dict(claims)

    async def merge_custom_claims(self, uid: str, updates: dict[str, Any]) -> None:
        claims = await self.get_custom_claims(uid)
        claims.update(updates)
        await self.set_custom_claims(uid, claims)

    async def verify_id_token(self, id_token: str) -> dict[str, Any]:
        if id_token != "valid-token":
            raise ValueError("Token is invalid")
        return {"uid": "user-1"}


@pytest.fixture
def firestore():
    """Empty in-memory Firestore."""
    return FakeFirestore()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def auth_service():
    return FakeAuth()


@pytest.fixture
def mock_llm():
    """LLM service whose structured output each test sets."""
    service = AsyncMock(spec=BaseLLMService)
    service.generate_structured_output.return_value = {}
    return service


@pytest.fixture
def sample_location():
    return {"latitude": 40.7128, "longitude": -74.006, "address": "1 Main St"}


@pytest.fixture
def job_document(sample_location):
    """A stored job assigned to ``tech-1``."""
    return {
        "companyId": COMPANY_ID,
        "title": "Fix AC unit",
        "description": "AC blowing warm air",
        "priority": "High",
        "status": "Assigned",
        "customerName": "Jane Doe",
        "customerPhone": "555-0100",
        "customerEmail": "jane@example.com",
        "location": sample_location,
        "quotedValue": 120.0,
        "expectedPartsCost": 30.0,
        "requiredParts": ["Capacitor"],
        "assignedTechnicianId": "tech-1",
        "notes": [],
        "photos": [],
    }


@pytest.fixture
def technician_document(sample_location):
    return {
        "companyId": COMPANY_ID,
        "name": "Bob Smith",
        "email": "bob@example.com",
        "skills": ["HVAC"],
        "isAvailable": False,
        "location": sample_location,
        "currentJobId": "job-1",
    }
