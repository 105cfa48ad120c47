"""Company membership: list, invite, change role, remove."""

import logging
from enum import Enum

from fastapi import Depends, Query
from google.cloud.firestore import SERVER_TIMESTAMP
from pydantic import EmailStr, Field, ValidationError

from db import (
    TECHNICIANS,
    USERS,
    AuthService,
    BatchWrite,
    FirestoreService,
    app_collection,
)
from dependencies import get_auth_service, get_firestore_service
from models import CamelModel, OnboardingStatus, UserProfile, UserRole
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)

NOT_A_MEMBER = "User not found in this company."


# --- Request Schemas ---


class MemberRole(str, Enum):
    """Roles a company admin can grant."""

    ADMIN = UserRole.ADMIN.value
    TECHNICIAN = UserRole.TECHNICIAN.value


class InviteUserInput(CamelModel):
    email: EmailStr
    role: MemberRole
    company_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)


class UpdateUserRoleInput(CamelModel):
    user_id: str = Field(..., min_length=1)
    company_id: str = Field(..., min_length=1)
    new_role: MemberRole


class RemoveUserFromCompanyInput(CamelModel):
    user_id: str = Field(..., min_length=1)
    company_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)


# --- Handlers ---


async def get_company_users(
    company_id: str = Query("", alias="companyId"),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Profiles of every user in a company; empty for an empty id."""
    if not company_id:
        return ActionResult(data=[])

    try:
        docs = await firestore.query_documents(
            USERS, filters=[("companyId", "==", company_id)]
        )
        users = [UserProfile.model_validate(doc).to_document() for doc in docs]
        return ActionResult(data=users)

    except Exception as e:
        logger.exception("Error fetching users of company %s", company_id)
        return action_failure("Failed to fetch users", e)


async def invite_user(
    payload: InviteUserInput,
    firestore: FirestoreService = Depends(get_firestore_service),
    auth_service: AuthService = Depends(get_auth_service),
) -> ActionResult:
    """Attach an existing, company-less user to a company.

    Technicians also get a technician profile keyed by their uid.
    """
    try:
        payload = InviteUserInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        matches = await firestore.query_documents(
            USERS, filters=[("email", "==", payload.email)], limit=1
        )
        if not matches:
            return ActionResult(
                error="User with this email has not signed up yet. "
                "Please ask them to create an account first."
            )
        user = matches[0]
        if user.get("companyId"):
            return ActionResult(error="User is already a member of another company.")

        uid = user.get("uid") or user["id"]
        writes = [
            BatchWrite(
                "update",
                USERS,
                uid,
                {
                    "companyId": payload.company_id,
                    "role": payload.role,
                    "onboardingStatus": OnboardingStatus.COMPLETED.value,
                },
            )
        ]

        if payload.role == UserRole.TECHNICIAN.value:
            technicians = app_collection(payload.app_id, TECHNICIANS)
            if await firestore.get_document(technicians, uid) is None:
                email = user.get("email", payload.email)
                writes.append(
                    BatchWrite(
                        "set",
                        technicians,
                        uid,
                        {
                            "companyId": payload.company_id,
                            "name": email.split("@")[0],
                            "email": email,
                            "isAvailable": True,
                            "skills": [],
                            "location": {
                                "latitude": 0,
                                "longitude": 0,
                                "address": "Not set",
                            },
                            "currentJobId": None,
                            "createdAt": SERVER_TIMESTAMP,
                            "updatedAt": SERVER_TIMESTAMP,
                        },
                    )
                )

        await firestore.commit_batch(writes)
        await auth_service.merge_custom_claims(
            uid, {"companyId": payload.company_id, "role": payload.role}
        )
        logger.info("User %s joined company %s as %s", uid, payload.company_id, payload.role)
        return ActionResult()

    except Exception as e:
        logger.exception("Error inviting %s", payload.email)
        return action_failure("Failed to invite user", e)


async def update_user_role(
    payload: UpdateUserRoleInput,
    firestore: FirestoreService = Depends(get_firestore_service),
    auth_service: AuthService = Depends(get_auth_service),
) -> ActionResult:
    try:
        payload = UpdateUserRoleInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        user = await firestore.get_document(USERS, payload.user_id)
        if user is None or user.get("companyId") != payload.company_id:
            return ActionResult(error=NOT_A_MEMBER)

        await firestore.update_document(USERS, payload.user_id, {"role": payload.new_role})
        await auth_service.merge_custom_claims(payload.user_id, {"role": payload.new_role})
        logger.info("User %s role changed to %s", payload.user_id, payload.new_role)
        return ActionResult()

    except Exception as e:
        logger.exception("Error updating role of %s", payload.user_id)
        return action_failure("Failed to update user role", e)


async def remove_user_from_company(
    payload: RemoveUserFromCompanyInput,
    firestore: FirestoreService = Depends(get_firestore_service),
    auth_service: AuthService = Depends(get_auth_service),
) -> ActionResult:
    """Detach a user; their technician profile in the company is deleted."""
    try:
        payload = RemoveUserFromCompanyInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        user = await firestore.get_document(USERS, payload.user_id)
        if user is None or user.get("companyId") != payload.company_id:
            return ActionResult(error=NOT_A_MEMBER)

        writes = [
            BatchWrite(
                "update",
                USERS,
                payload.user_id,
                {
                    "companyId": None,
                    "role": None,
                    "onboardingStatus": OnboardingStatus.PENDING_CREATION.value,
                },
            )
        ]
        technicians = app_collection(payload.app_id, TECHNICIANS)
        technician = await firestore.get_document(technicians, payload.user_id)
        if technician and technician.get("companyId") == payload.company_id:
            writes.append(BatchWrite("delete", technicians, payload.user_id))

        await firestore.commit_batch(writes)
        await auth_service.merge_custom_claims(
            payload.user_id, {"companyId": None, "role": None}
        )
        logger.info("User %s removed from company %s", payload.user_id, payload.company_id)
        return ActionResult()

    except Exception as e:
        logger.exception("Error removing %s from company", payload.user_id)
        return action_failure("Failed to remove user", e)
