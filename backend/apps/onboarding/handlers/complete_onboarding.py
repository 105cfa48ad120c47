"""POST /onboarding - Create the caller's company."""

import logging
from typing import Any

from fastapi import Depends
from google.cloud.firestore import SERVER_TIMESTAMP
from pydantic import Field, ValidationError

from db import (
    COMPANIES,
    PARTS,
    SKILLS,
    USERS,
    AuthService,
    BatchWrite,
    FirestoreService,
    app_collection,
)
from dependencies import get_auth_service, get_current_uid, get_firestore_service
from models import CamelModel, OnboardingStatus, UserRole
from responses import ActionResult, action_failure, validation_failure
from services import PREDEFINED_PARTS, PREDEFINED_SKILLS

logger = logging.getLogger(__name__)


class CompleteOnboardingInput(CamelModel):
    company_name: str = Field(..., min_length=2)
    app_id: str = Field(..., min_length=1)


def _seed_catalog(collection: str, names: list[str], company_id: str) -> list[BatchWrite]:
    return [
        BatchWrite("set", collection, None, {"name": name, "companyId": company_id})
        for name in names
    ]


async def complete_onboarding(
    payload: CompleteOnboardingInput,
    uid: str = Depends(get_current_uid),
    firestore: FirestoreService = Depends(get_firestore_service),
    auth_service: AuthService = Depends(get_auth_service),
) -> ActionResult:
    """Create a company owned by ``uid`` and make the user its admin.

    The company id is the owner's uid. The predefined skills and parts are
    seeded in the same batch.
    """
    try:
        payload = CompleteOnboardingInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        if not uid:
            raise PermissionError("You must be logged in to complete onboarding.")

        company_id = uid
        writes: list[BatchWrite] = [
            BatchWrite(
                "set",
                COMPANIES,
                company_id,
                {
                    "name": payload.company_name,
                    "ownerId": uid,
                    "createdAt": SERVER_TIMESTAMP,
                },
            ),
            BatchWrite(
                "update",
                USERS,
                uid,
                {
                    "companyId": company_id,
                    "role": UserRole.ADMIN.value,
                    "onboardingStatus": OnboardingStatus.COMPLETED.value,
                },
            ),
        ]
        writes += _seed_catalog(
            app_collection(payload.app_id, SKILLS), PREDEFINED_SKILLS, company_id
        )
        writes += _seed_catalog(
            app_collection(payload.app_id, PARTS), PREDEFINED_PARTS, company_id
        )
        await firestore.commit_batch(writes)

        claims: dict[str, Any] = {"role": UserRole.ADMIN.value, "companyId": company_id}
        await auth_service.merge_custom_claims(uid, claims)
        logger.info("Company %s created by %s", company_id, uid)
        return ActionResult()

    except Exception as e:
        logger.exception("Error completing onboarding for %s", uid)
        return action_failure("Failed to complete onboarding", e)
