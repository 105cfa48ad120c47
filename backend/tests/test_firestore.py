"""Tests for FirestoreService batch commits."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from db import MAX_BATCH_WRITES, BatchWrite, FirestoreService


def make_service() -> tuple[FirestoreService, MagicMock]:
    service = object.__new__(FirestoreService)
    batch = MagicMock()
    batch.commit = AsyncMock()
    service.db = MagicMock()
    service.db.batch.return_value = batch
    return service, batch


def writes(count: int) -> list[BatchWrite]:
    return [
        BatchWrite("set", "jobs", f"job-{i}", {"title": "Job"}) for i in range(count)
    ]


class TestCommitBatch:
    """Tests for FirestoreService.commit_batch."""

    @pytest.mark.asyncio
    async def test_single_commit_at_limit(self):
        service, batch = make_service()

        await service.commit_batch(writes(MAX_BATCH_WRITES))

        assert batch.set.call_count == MAX_BATCH_WRITES
        batch.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_oversize_batch_writes_nothing(self):
        service, batch = make_service()

        with pytest.raises(ValueError, match="at most 500 writes, got 501"):
            await service.commit_batch(writes(MAX_BATCH_WRITES + 1))

        service.db.batch.assert_not_called()
        batch.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_batch_is_not_committed(self):
        service, batch = make_service()

        await service.commit_batch([])

        batch.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_document_id_is_generated_when_missing(self):
        service, batch = make_service()

        await service.commit_batch([BatchWrite("set", "feedback", None, {"a": 1})])

        service.db.collection.return_value.document.assert_called_once_with()
        batch.commit.assert_awaited_once()
