"""Tests for technician availability and profile change requests."""

import pytest

from apps.technicians.handlers import (
    approve_profile_change_request,
    handle_technician_unavailability,
    reject_profile_change_request,
    request_profile_change,
)
from conftest import APP_ID, COMPANY_ID
from db import JOBS, PROFILE_CHANGE_REQUESTS, TECHNICIANS, app_collection

JOBS_PATH = app_collection(APP_ID, JOBS)
TECHS_PATH = app_collection(APP_ID, TECHNICIANS)
REQUESTS_PATH = app_collection(APP_ID, PROFILE_CHANGE_REQUESTS)


class TestTechnicianUnavailability:
    """Tests for handle_technician_unavailability."""

    @pytest.fixture
    def seeded(self, firestore, job_document, technician_document):
        firestore.seed(TECHS_PATH, "tech-1", technician_document)
        firestore.seed(JOBS_PATH, "job-1", job_document)
        firestore.seed(JOBS_PATH, "job-2", job_document | {"status": "En Route"})
        firestore.seed(JOBS_PATH, "job-3", job_document | {"status": "Completed"})
        firestore.seed(
            JOBS_PATH, "job-4", job_document | {"assignedTechnicianId": "tech-2"}
        )
        return firestore

    @pytest.mark.asyncio
    async def test_active_jobs_are_unassigned(self, seeded):
        result = await handle_technician_unavailability(
            {
                "companyId": COMPANY_ID,
                "technicianId": "tech-1",
                "appId": APP_ID,
                "reason": "Sick",
                "unavailableUntil": "2024-06-03",
            },
            firestore=seeded,
        )

        assert result.error is None
        assert sorted(result.data["unassignedJobIds"]) == ["job-1", "job-2"]

        tech = seeded.doc(TECHS_PATH, "tech-1")
        assert tech["isAvailable"] is False
        assert tech["currentJobId"] is None
        assert tech["unavailabilityReason"] == "Sick"
        assert tech["unavailableUntil"] == "2024-06-03"

        job = seeded.doc(JOBS_PATH, "job-1")
        assert job["status"] == "Unassigned"
        assert job["assignedTechnicianId"] is None
        assert job["notes"] == [
            "(Reassigned: Technician marked as unavailable: Sick)"
        ]
        assert seeded.doc(JOBS_PATH, "job-3")["status"] == "Completed"
        assert seeded.doc(JOBS_PATH, "job-4")["assignedTechnicianId"] == "tech-2"
        # Technician and jobs land in one batch
        assert len(seeded.batches) == 1
        assert len(seeded.batches[0]) == 3

    @pytest.mark.asyncio
    async def test_note_without_reason(self, seeded):
        await handle_technician_unavailability(
            {"companyId": COMPANY_ID, "technicianId": "tech-1", "appId": APP_ID},
            firestore=seeded,
        )

        assert seeded.doc(JOBS_PATH, "job-1")["notes"] == [
            "(Reassigned: Technician marked as unavailable)"
        ]

    @pytest.mark.asyncio
    async def test_other_company_is_rejected(self, seeded):
        result = await handle_technician_unavailability(
            {"companyId": "company-2", "technicianId": "tech-1", "appId": APP_ID},
            firestore=seeded,
        )

        assert result.error == (
            "Technician not found or does not belong to your company."
        )
        assert seeded.batches == []
        assert seeded.doc(JOBS_PATH, "job-1")["status"] == "Assigned"


class TestProfileChangeRequests:
    """Tests for the request, approve and reject flow."""

    @pytest.fixture
    def request_payload(self):
        return {
            "companyId": COMPANY_ID,
            "appId": APP_ID,
            "technicianId": "tech-1",
            "technicianName": "Bob Smith",
            "requestedChanges": {"phone": "555-0199", "skills": ["HVAC", "Plumbing"]},
            "notes": "New phone",
        }

    @pytest.mark.asyncio
    async def test_request_is_pending(self, firestore, request_payload):
        result = await request_profile_change(request_payload, firestore=firestore)

        assert result.error is None
        stored = firestore.doc(REQUESTS_PATH, result.data["id"])
        assert stored["status"] == "pending"
        assert stored["technicianId"] == "tech-1"
        assert stored["requestedChanges"]["phone"] == "555-0199"
        assert "reviewedAt" not in stored

    @pytest.mark.asyncio
    async def test_request_cannot_touch_other_fields(self, firestore, request_payload):
        request_payload["requestedChanges"] = {"companyId": "company-2", "phone": "1"}

        result = await request_profile_change(request_payload, firestore=firestore)

        assert result.error.startswith("requestedChanges:")
        assert "Fields cannot be changed: companyId" in result.error
        assert firestore.docs(REQUESTS_PATH) == []

    @pytest.mark.asyncio
    async def test_empty_request_is_rejected(self, firestore, request_payload):
        request_payload["requestedChanges"] = {}

        result = await request_profile_change(request_payload, firestore=firestore)

        assert result.error.startswith("requestedChanges:")

    @pytest.mark.asyncio
    async def test_approve_applies_changes(
        self, firestore, request_payload, technician_document
    ):
        firestore.seed(TECHS_PATH, "tech-1", technician_document)
        created = await request_profile_change(request_payload, firestore=firestore)
        request_id = created.data["id"]

        result = await approve_profile_change_request(
            {
                "companyId": COMPANY_ID,
                "appId": APP_ID,
                "requestId": request_id,
                "approvedChanges": {"phone": "555-0199"},
                "reviewNotes": "Skills need a certificate",
            },
            firestore=firestore,
        )

        assert result.error is None
        tech = firestore.doc(TECHS_PATH, "tech-1")
        assert tech["phone"] == "555-0199"
        assert tech["skills"] == ["HVAC"]
        stored = firestore.doc(REQUESTS_PATH, request_id)
        assert stored["status"] == "approved"
        assert stored["approvedChanges"] == {"phone": "555-0199"}
        assert stored["reviewNotes"] == "Skills need a certificate"
        assert stored["reviewedAt"]

    @pytest.mark.asyncio
    async def test_approve_other_company_request(self, firestore, request_payload):
        created = await request_profile_change(request_payload, firestore=firestore)

        result = await approve_profile_change_request(
            {
                "companyId": "company-2",
                "appId": APP_ID,
                "requestId": created.data["id"],
                "approvedChanges": {"phone": "555-0199"},
            },
            firestore=firestore,
        )

        assert result.error == (
            "Request not found or you do not have permission to modify it."
        )
        assert firestore.batches == []

    @pytest.mark.asyncio
    async def test_approve_cannot_grant_other_fields(self, firestore, request_payload):
        created = await request_profile_change(request_payload, firestore=firestore)

        result = await approve_profile_change_request(
            {
                "companyId": COMPANY_ID,
                "appId": APP_ID,
                "requestId": created.data["id"],
                "approvedChanges": {"isAvailable": True},
            },
            firestore=firestore,
        )

        assert result.error.startswith("approvedChanges:")

    @pytest.mark.asyncio
    async def test_reject(self, firestore, request_payload):
        created = await request_profile_change(request_payload, firestore=firestore)
        request_id = created.data["id"]

        result = await reject_profile_change_request(
            {
                "companyId": COMPANY_ID,
                "appId": APP_ID,
                "requestId": request_id,
                "reviewNotes": "Use the office line",
            },
            firestore=firestore,
        )

        assert result.error is None
        stored = firestore.doc(REQUESTS_PATH, request_id)
        assert stored["status"] == "rejected"
        assert stored["reviewNotes"] == "Use the office line"

    @pytest.mark.asyncio
    async def test_reject_missing_request(self, firestore):
        result = await reject_profile_change_request(
            {"companyId": COMPANY_ID, "appId": APP_ID, "requestId": "ghost"},
            firestore=firestore,
        )

        assert result.error.startswith("Request not found")
