"""Tests for user documents, membership and onboarding."""

import pytest

from apps.onboarding.handlers import complete_onboarding
from apps.users.handlers import (
    ensure_user_document,
    get_company_users,
    invite_user,
    remove_user_from_company,
    update_user_role,
)
from conftest import APP_ID, COMPANY_ID
from db import COMPANIES, PARTS, SKILLS, TECHNICIANS, USERS, app_collection
from services import PREDEFINED_PARTS, PREDEFINED_SKILLS

TECHS_PATH = app_collection(APP_ID, TECHNICIANS)


def _user(uid, email, company_id=None, role=None):
    return {
        "uid": uid,
        "email": email,
        "onboardingStatus": "completed" if company_id else "pending_creation",
        "role": role,
        "companyId": company_id,
    }


class TestEnsureUserDocument:
    """Tests for ensure_user_document."""

    @pytest.mark.asyncio
    async def test_creates_pending_user(self, firestore, auth_service):
        result = await ensure_user_document(
            {"uid": "u1", "email": "new@example.com"},
            firestore=firestore,
            auth_service=auth_service,
        )

        assert result.error is None
        user = firestore.doc(USERS, "u1")
        assert user["onboardingStatus"] == "pending_creation"
        assert user["role"] is None
        assert user["companyId"] is None
        # Empty claims already match a user without role or company
        assert auth_service.set_calls == 0

    @pytest.mark.asyncio
    async def test_super_admin_gets_dev_company(self, firestore, auth_service):
        result = await ensure_user_document(
            {"uid": "root", "email": "Owner@FleetSync.dev"},
            firestore=firestore,
            auth_service=auth_service,
        )

        assert result.error is None
        user = firestore.doc(USERS, "root")
        assert user["role"] == "superAdmin"
        assert user["onboardingStatus"] == "completed"
        assert user["companyId"] == "fleetsync_ai_dev"
        assert firestore.doc(COMPANIES, "fleetsync_ai_dev")["ownerId"] == "root"
        assert auth_service.claims["root"] == {
            "role": "superAdmin",
            "companyId": "fleetsync_ai_dev",
        }

    @pytest.mark.asyncio
    async def test_is_idempotent(self, firestore, auth_service):
        payload = {"uid": "root", "email": "owner@fleetsync.dev"}

        await ensure_user_document(payload, firestore=firestore, auth_service=auth_service)
        first = dict(firestore.doc(USERS, "root"))
        await ensure_user_document(payload, firestore=firestore, auth_service=auth_service)

        assert firestore.doc(USERS, "root") == first
        assert auth_service.set_calls == 1

    @pytest.mark.asyncio
    async def test_resyncs_stale_claims(self, firestore, auth_service):
        firestore.seed(USERS, "u1", _user("u1", "a@example.com", COMPANY_ID, "admin"))
        auth_service.claims["u1"] = {"role": "technician", "extra": True}

        await ensure_user_document(
            {"uid": "u1", "email": "a@example.com"},
            firestore=firestore,
            auth_service=auth_service,
        )

        assert auth_service.claims["u1"] == {
            "role": "admin",
            "companyId": COMPANY_ID,
            "extra": True,
        }

    @pytest.mark.asyncio
    async def test_rejects_invalid_email(self, firestore, auth_service):
        result = await ensure_user_document(
            {"uid": "u1", "email": "nope"},
            firestore=firestore,
            auth_service=auth_service,
        )
        assert result.error.startswith("email:")
        assert firestore.doc(USERS, "u1") is None


class TestMembership:
    """Tests for listing, inviting, re-roling and removing members."""

    @pytest.mark.asyncio
    async def test_get_company_users(self, firestore):
        firestore.seed(USERS, "a", _user("a", "a@example.com", COMPANY_ID, "admin"))
        firestore.seed(USERS, "b", _user("b", "b@example.com", "other", "admin"))

        result = await get_company_users(company_id=COMPANY_ID, firestore=firestore)

        assert [u["uid"] for u in result.data] == ["a"]
        assert result.data[0]["companyId"] == COMPANY_ID

    @pytest.mark.asyncio
    async def test_get_company_users_empty_id(self, firestore):
        result = await get_company_users(company_id="", firestore=firestore)
        assert result.data == []

    @pytest.mark.asyncio
    async def test_invite_unknown_email(self, firestore, auth_service):
        result = await invite_user(
            {
                "email": "ghost@example.com",
                "role": "technician",
                "companyId": COMPANY_ID,
                "appId": APP_ID,
            },
            firestore=firestore,
            auth_service=auth_service,
        )
        assert result.error == (
            "User with this email has not signed up yet. "
            "Please ask them to create an account first."
        )

    @pytest.mark.asyncio
    async def test_invite_member_of_other_company(self, firestore, auth_service):
        firestore.seed(USERS, "b", _user("b", "b@example.com", "other", "admin"))

        result = await invite_user(
            {
                "email": "b@example.com",
                "role": "admin",
                "companyId": COMPANY_ID,
                "appId": APP_ID,
            },
            firestore=firestore,
            auth_service=auth_service,
        )
        assert result.error == "User is already a member of another company."

    @pytest.mark.asyncio
    async def test_invite_technician_creates_profile(self, firestore, auth_service):
        firestore.seed(USERS, "t1", _user("t1", "tina@example.com"))

        result = await invite_user(
            {
                "email": "tina@example.com",
                "role": "technician",
                "companyId": COMPANY_ID,
                "appId": APP_ID,
            },
            firestore=firestore,
            auth_service=auth_service,
        )

        assert result.error is None
        user = firestore.doc(USERS, "t1")
        assert user["companyId"] == COMPANY_ID
        assert user["role"] == "technician"
        assert user["onboardingStatus"] == "completed"
        tech = firestore.doc(TECHS_PATH, "t1")
        assert tech["name"] == "tina"
        assert tech["isAvailable"] is True
        assert auth_service.claims["t1"] == {"companyId": COMPANY_ID, "role": "technician"}

    @pytest.mark.asyncio
    async def test_super_admin_role_cannot_be_granted(self, firestore, auth_service):
        result = await invite_user(
            {
                "email": "tina@example.com",
                "role": "superAdmin",
                "companyId": COMPANY_ID,
                "appId": APP_ID,
            },
            firestore=firestore,
            auth_service=auth_service,
        )
        assert result.error.startswith("role:")

    @pytest.mark.asyncio
    async def test_update_role(self, firestore, auth_service):
        firestore.seed(USERS, "t1", _user("t1", "t@example.com", COMPANY_ID, "technician"))

        result = await update_user_role(
            {"userId": "t1", "companyId": COMPANY_ID, "newRole": "admin"},
            firestore=firestore,
            auth_service=auth_service,
        )

        assert result.error is None
        assert firestore.doc(USERS, "t1")["role"] == "admin"
        assert auth_service.claims["t1"]["role"] == "admin"

    @pytest.mark.asyncio
    async def test_update_role_outside_company(self, firestore, auth_service):
        firestore.seed(USERS, "t1", _user("t1", "t@example.com", "other", "technician"))

        result = await update_user_role(
            {"userId": "t1", "companyId": COMPANY_ID, "newRole": "admin"},
            firestore=firestore,
            auth_service=auth_service,
        )
        assert result.error == "User not found in this company."

    @pytest.mark.asyncio
    async def test_remove_user(self, firestore, auth_service, technician_document):
        firestore.seed(USERS, "t1", _user("t1", "t@example.com", COMPANY_ID, "technician"))
        firestore.seed(TECHS_PATH, "t1", technician_document)
        auth_service.claims["t1"] = {"companyId": COMPANY_ID, "role": "technician"}

        result = await remove_user_from_company(
            {"userId": "t1", "companyId": COMPANY_ID, "appId": APP_ID},
            firestore=firestore,
            auth_service=auth_service,
        )

        assert result.error is None
        user = firestore.doc(USERS, "t1")
        assert user["companyId"] is None
        assert user["role"] is None
        assert user["onboardingStatus"] == "pending_creation"
        assert firestore.doc(TECHS_PATH, "t1") is None
        assert auth_service.claims["t1"] == {"companyId": None, "role": None}


class TestCompleteOnboarding:
    """Tests for complete_onboarding."""

    @pytest.mark.asyncio
    async def test_creates_company_in_one_batch(self, firestore, auth_service):
        firestore.seed(USERS, "owner", _user("owner", "owner@example.com"))

        result = await complete_onboarding(
            {"companyName": "Acme Heating", "appId": APP_ID},
            uid="owner",
            firestore=firestore,
            auth_service=auth_service,
        )

        assert result.error is None
        assert len(firestore.batches) == 1
        company = firestore.doc(COMPANIES, "owner")
        assert company["name"] == "Acme Heating"
        assert company["ownerId"] == "owner"
        user = firestore.doc(USERS, "owner")
        assert user["role"] == "admin"
        assert user["companyId"] == "owner"
        assert user["onboardingStatus"] == "completed"
        skills = firestore.docs(app_collection(APP_ID, SKILLS))
        parts = firestore.docs(app_collection(APP_ID, PARTS))
        assert sorted(s["name"] for s in skills) == sorted(PREDEFINED_SKILLS)
        assert len(parts) == len(PREDEFINED_PARTS)
        assert all(p["companyId"] == "owner" for p in parts)
        assert auth_service.claims["owner"] == {"role": "admin", "companyId": "owner"}

    @pytest.mark.asyncio
    async def test_short_company_name(self, firestore, auth_service):
        result = await complete_onboarding(
            {"companyName": "A", "appId": APP_ID},
            uid="owner",
            firestore=firestore,
            auth_service=auth_service,
        )
        assert result.error.startswith("companyName:")
        assert firestore.batches == []
