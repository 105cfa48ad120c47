"""Tests for dispatcher reschedules and fleet optimization confirmation."""

from datetime import datetime

import pytest

from apps.jobs.handlers import confirm_fleet_optimization, confirm_manual_reschedule
from conftest import APP_ID, COMPANY_ID
from db import DISPATCHER_FEEDBACK, JOBS, app_collection

JOBS_PATH = app_collection(APP_ID, JOBS)
FEEDBACK_PATH = app_collection(APP_ID, DISPATCHER_FEEDBACK)


class TestManualReschedule:
    """Tests for confirm_manual_reschedule."""

    @pytest.mark.asyncio
    async def test_moves_job(self, firestore, job_document):
        firestore.seed(JOBS_PATH, "job-1", job_document)

        result = await confirm_manual_reschedule(
            {
                "companyId": COMPANY_ID,
                "appId": APP_ID,
                "movedJobId": "job-1",
                "newScheduledTime": "2024-06-01T14:00:00Z",
            },
            firestore=firestore,
        )

        assert result.error is None
        job = firestore.doc(JOBS_PATH, "job-1")
        assert job["scheduledTime"] == "2024-06-01T14:00:00Z"
        assert isinstance(job["updatedAt"], datetime)
        assert firestore.docs(FEEDBACK_PATH) == []

    @pytest.mark.asyncio
    async def test_ai_placement_override_is_recorded(self, firestore, job_document):
        firestore.seed(JOBS_PATH, "job-1", job_document)

        await confirm_manual_reschedule(
            {
                "companyId": COMPANY_ID,
                "appId": APP_ID,
                "movedJobId": "job-1",
                "newScheduledTime": "2024-06-01T14:00:00Z",
                "aiSuggestedTechnicianId": "tech-1",
                "aiReasoning": "Closest technician",
            },
            firestore=firestore,
        )

        [feedback] = firestore.docs(FEEDBACK_PATH)
        assert feedback["jobId"] == "job-1"
        assert feedback["aiSuggestedTechnicianId"] == "tech-1"
        assert feedback["dispatcherSelectedTechnicianId"] == "manual_reschedule"
        assert feedback["aiReasoning"] == "Closest technician"
        assert len(firestore.batches[0]) == 2

    @pytest.mark.asyncio
    async def test_other_company_job(self, firestore, job_document):
        firestore.seed(JOBS_PATH, "job-1", job_document | {"companyId": "company-2"})

        result = await confirm_manual_reschedule(
            {
                "companyId": COMPANY_ID,
                "appId": APP_ID,
                "movedJobId": "job-1",
                "newScheduledTime": "2024-06-01T14:00:00Z",
            },
            firestore=firestore,
        )

        assert result.error == (
            "Job job-1 not found or does not belong to your company."
        )
        assert "scheduledTime" not in firestore.doc(JOBS_PATH, "job-1")


class TestFleetOptimization:
    """Tests for confirm_fleet_optimization."""

    @pytest.fixture
    def seeded(self, firestore, job_document):
        firestore.seed(JOBS_PATH, "job-1", job_document)
        firestore.seed(
            JOBS_PATH,
            "job-2",
            job_document
            | {"status": "Unassigned", "assignedTechnicianId": None},
        )
        return firestore

    @pytest.mark.asyncio
    async def test_applies_changes_in_one_batch(self, seeded):
        result = await confirm_fleet_optimization(
            {
                "companyId": COMPANY_ID,
                "appId": APP_ID,
                "changesToConfirm": [
                    {
                        "jobId": "job-1",
                        "originalTechnicianId": "tech-1",
                        "newTechnicianId": "tech-1",
                        "newScheduledTime": "2024-06-01T09:00:00Z",
                        "justification": "Earlier slot",
                    },
                    {
                        "jobId": "job-2",
                        "originalTechnicianId": None,
                        "newTechnicianId": "tech-3",
                        "justification": "Nearby",
                    },
                ],
            },
            firestore=seeded,
        )

        assert result.error is None
        assert len(seeded.batches) == 1

        moved = seeded.doc(JOBS_PATH, "job-1")
        assert moved["scheduledTime"] == "2024-06-01T09:00:00Z"
        assert moved["assignedTechnicianId"] == "tech-1"
        assert moved["status"] == "Assigned"
        assert moved["notes"] == ["(Reassigned via Fleet Optimization: Earlier slot)"]

        assigned = seeded.doc(JOBS_PATH, "job-2")
        assert assigned["assignedTechnicianId"] == "tech-3"
        assert assigned["status"] == "Assigned"
        assert isinstance(assigned["assignedAt"], datetime)

    @pytest.mark.asyncio
    async def test_unassign_clears_assigned_at(self, seeded):
        seeded.seed(
            JOBS_PATH,
            "job-1",
            seeded.doc(JOBS_PATH, "job-1") | {"assignedAt": datetime(2024, 5, 1)},
        )

        await confirm_fleet_optimization(
            {
                "companyId": COMPANY_ID,
                "appId": APP_ID,
                "changesToConfirm": [
                    {
                        "jobId": "job-1",
                        "originalTechnicianId": "tech-1",
                        "newTechnicianId": None,
                        "justification": "No qualified technician",
                    }
                ],
            },
            firestore=seeded,
        )

        job = seeded.doc(JOBS_PATH, "job-1")
        assert job["status"] == "Unassigned"
        assert job["assignedTechnicianId"] is None
        assert "assignedAt" not in job

    @pytest.mark.asyncio
    async def test_foreign_job_writes_nothing(self, seeded, job_document):
        seeded.seed(JOBS_PATH, "job-9", job_document | {"companyId": "company-2"})

        result = await confirm_fleet_optimization(
            {
                "companyId": COMPANY_ID,
                "appId": APP_ID,
                "changesToConfirm": [
                    {
                        "jobId": "job-1",
                        "newTechnicianId": "tech-2",
                        "originalTechnicianId": "tech-1",
                        "justification": "Balance load",
                    },
                    {
                        "jobId": "job-9",
                        "newTechnicianId": "tech-2",
                        "justification": "Balance load",
                    },
                ],
            },
            firestore=seeded,
        )

        assert result.error == (
            "Job job-9 not found or does not belong to your company."
        )
        assert seeded.batches == []
        assert seeded.doc(JOBS_PATH, "job-1")["assignedTechnicianId"] == "tech-1"

    @pytest.mark.asyncio
    async def test_empty_change_list(self, firestore):
        result = await confirm_fleet_optimization(
            {"companyId": COMPANY_ID, "appId": APP_ID, "changesToConfirm": []},
            firestore=firestore,
        )

        assert result.error.startswith("changesToConfirm:")
