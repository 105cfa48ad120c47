"""HTTP-level tests: routing, request validation and error envelopes."""

import pytest
from fastapi.testclient import TestClient

from conftest import APP_ID, COMPANY_ID
from db import COMPANIES, JOBS, TECHNICIANS, USERS, app_collection
from dependencies import (
    get_auth_service,
    get_firestore_service,
    get_llm_service,
    get_storage_service,
)
from main import app

JOBS_PATH = app_collection(APP_ID, JOBS)


@pytest.fixture
def client(firestore, storage, auth_service, mock_llm):
    app.dependency_overrides[get_firestore_service] = lambda: firestore
    app.dependency_overrides[get_storage_service] = lambda: storage
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_llm_service] = lambda: mock_llm
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        names = {s["name"]: s["status"] for s in body["services"]}
        assert names["firestore"] == "healthy"
        assert "X-Request-ID" in response.headers

    def test_root(self, client):
        assert client.get("/").json()["name"] == "FleetSync AI"


class TestJobsApi:
    def test_create_job(self, client, firestore, sample_location):
        response = client.post(
            "/api/jobs",
            json={
                "appId": APP_ID,
                "companyId": COMPANY_ID,
                "title": "Leaking pipe",
                "customerName": "Jane Doe",
                "location": sample_location,
            },
        )

        assert response.status_code == 200
        job_id = response.json()["data"]["id"]
        assert firestore.doc(JOBS_PATH, job_id)["title"] == "Leaking pipe"

    def test_request_validation_uses_action_shape(self, client):
        response = client.post("/api/jobs", json={"companyId": COMPANY_ID})

        assert response.status_code == 422
        body = response.json()
        assert body["data"] is None
        assert "appId: Field required" in body["error"]
        assert "title: Field required" in body["error"]

    def test_delete_job(self, client, firestore, job_document):
        firestore.seed(JOBS_PATH, "job-1", job_document | {"assignedTechnicianId": None})

        response = client.delete(
            "/api/jobs/job-1", params={"companyId": COMPANY_ID, "appId": APP_ID}
        )

        assert response.json() == {"data": None, "error": None}
        assert firestore.doc(JOBS_PATH, "job-1") is None

    def test_download_invoice(self, client, firestore, job_document):
        firestore.seed(JOBS_PATH, "job-1", job_document)
        firestore.seed(COMPANIES, COMPANY_ID, {"name": "Acme Heating"})

        response = client.get(
            "/api/jobs/job-1/invoice", params={"companyId": COMPANY_ID, "appId": APP_ID}
        )

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert 'filename="Invoice_job-1.pdf"' in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    def test_invoice_not_found(self, client):
        response = client.get(
            "/api/jobs/ghost/invoice", params={"companyId": COMPANY_ID, "appId": APP_ID}
        )

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "1003"
        assert "permission to invoice" in body["message"]


class TestTrackingApi:
    def test_invalid_token(self, client):
        response = client.get("/api/track/nope", params={"appId": APP_ID})

        assert response.status_code == 200
        assert response.json()["error"] == "Tracking link is invalid or has expired."


class TestOnboardingApi:
    def test_requires_bearer_token(self, client):
        response = client.post(
            "/api/onboarding", json={"companyName": "Acme", "appId": APP_ID}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "1007"

    def test_rejects_invalid_token(self, client):
        response = client.post(
            "/api/onboarding",
            json={"companyName": "Acme", "appId": APP_ID},
            headers={"Authorization": "Bearer forged"},
        )

        assert response.status_code == 401

    def test_creates_company_for_caller(self, client, firestore):
        firestore.seed(USERS, "user-1", {"uid": "user-1", "email": "u@example.com"})

        response = client.post(
            "/api/onboarding",
            json={"companyName": "Acme", "appId": APP_ID},
            headers={"Authorization": "Bearer valid-token"},
        )

        assert response.json()["error"] is None
        assert firestore.doc(COMPANIES, "user-1")["name"] == "Acme"


class TestChatApi:
    def test_multipart_message(self, client, firestore, storage):
        response = client.post(
            "/api/chat/messages",
            data={
                "jobId": "job-1",
                "companyId": COMPANY_ID,
                "senderId": "dispatcher",
                "senderName": "Dana",
                "receiverId": "tech-1",
                "text": "Photo of the unit",
                "appId": APP_ID,
            },
            files={"attachment": ("unit.jpg", b"\xff\xd8", "image/jpeg")},
        )

        assert response.json()["error"] is None
        [(destination, data, _)] = storage.uploads
        assert destination.startswith("chat-attachments/job-1/")
        assert data == b"\xff\xd8"


class TestAIApi:
    def test_suggest_priority(self, client, mock_llm):
        mock_llm.generate_structured_output.return_value = {
            "suggestedPriority": "High",
            "reasoning": "Gas smell",
        }

        response = client.post(
            "/api/ai/suggest-priority", json={"jobDescription": "Smell of gas"}
        )

        assert response.json()["data"]["suggestedPriority"] == "High"
        assert "X-RateLimit-Limit" in response.headers

    def test_schedule_health_route(self, client):
        response = client.post(
            "/api/ai/schedule-health", json={"technicians": [], "jobs": []}
        )

        assert response.json() == {"data": [], "error": None}


class TestTriageApi:
    def test_multipart_photos(self, client, firestore, storage, mock_llm, job_document):
        firestore.seed(
            JOBS_PATH,
            "job-1",
            job_document
            | {"triageToken": "tri-1", "triageTokenExpiresAt": "2999-01-01T00:00:00"},
        )
        mock_llm.generate_structured_output.return_value = {
            "identifiedEquipment": "Carrier 24ACC6",
            "suggestedParts": [],
            "repairGuide": "1. Reset the breaker.",
        }

        response = client.post(
            "/api/triage/tri-1",
            data={"appId": APP_ID},
            files=[
                ("photos", ("a.jpg", b"\xff\xd8", "image/jpeg")),
                ("photos", ("b.jpg", b"\xff\xd9", "image/jpeg")),
            ],
        )

        assert response.json() == {"data": None, "error": None}
        assert len(storage.uploads) == 2
        assert "X-RateLimit-Limit" in response.headers
        assert "triageToken" not in firestore.doc(JOBS_PATH, "job-1")

    def test_invalid_token(self, client):
        response = client.get("/api/triage/nope", params={"appId": APP_ID})

        assert response.json()["error"] == "This link is invalid or has expired."


class TestTechniciansApi:
    def test_mark_unavailable(self, client, firestore, technician_document):
        firestore.seed(
            app_collection(APP_ID, TECHNICIANS), "tech-1", technician_document
        )

        response = client.post(
            "/api/technicians/unavailable",
            json={"companyId": COMPANY_ID, "technicianId": "tech-1", "appId": APP_ID},
        )

        assert response.json() == {"data": {"unassignedJobIds": []}, "error": None}
