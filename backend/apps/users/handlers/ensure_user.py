"""POST /users/ensure - Create the user document on first sign-in."""

import logging

from fastapi import Depends
from google.cloud.firestore import SERVER_TIMESTAMP
from pydantic import EmailStr, Field, ValidationError

from config import get_settings
from db import COMPANIES, USERS, AuthService, FirestoreService
from dependencies import get_auth_service, get_firestore_service
from models import CamelModel, OnboardingStatus, UserRole
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)


class EnsureUserDocumentInput(CamelModel):
    uid: str = Field(..., min_length=1)
    email: EmailStr


async def _ensure_dev_company(firestore: FirestoreService, owner_id: str) -> None:
    settings = get_settings()
    if await firestore.get_document(COMPANIES, settings.dev_company_id) is not None:
        return
    await firestore.set_document(
        COMPANIES,
        settings.dev_company_id,
        {
            "name": settings.dev_company_name,
            "ownerId": owner_id,
            "createdAt": SERVER_TIMESTAMP,
            "updatedAt": SERVER_TIMESTAMP,
        },
    )
    logger.info("Created dev company %s", settings.dev_company_id)


async def _sync_claims(auth_service: AuthService, uid: str, profile: dict) -> None:
    """Copy role and companyId from the profile into auth custom claims."""
    claims = await auth_service.get_custom_claims(uid)
    wanted = {
        "role": profile.get("role") or None,
        "companyId": profile.get("companyId") or None,
    }
    changed = {k: v for k, v in wanted.items() if claims.get(k) != v}
    if changed:
        await auth_service.set_custom_claims(uid, {**claims, **changed})


async def ensure_user_document(
    payload: EnsureUserDocumentInput,
    firestore: FirestoreService = Depends(get_firestore_service),
    auth_service: AuthService = Depends(get_auth_service),
) -> ActionResult:
    """Idempotently create ``users/{uid}`` and sync custom claims.

    The configured super-admin email is created as ``superAdmin`` of the
    dev company. Claims are written only when they differ from the document.
    """
    try:
        payload = EnsureUserDocumentInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        profile = await firestore.get_document(USERS, payload.uid)
        if profile is None:
            settings = get_settings()
            is_super_admin = bool(settings.super_admin_email) and (
                payload.email.lower() == settings.super_admin_email.lower()
            )
            profile = {
                "uid": payload.uid,
                "email": payload.email,
                "onboardingStatus": (
                    OnboardingStatus.COMPLETED
                    if is_super_admin
                    else OnboardingStatus.PENDING_CREATION
                ).value,
                "role": UserRole.SUPER_ADMIN.value if is_super_admin else None,
                "companyId": settings.dev_company_id if is_super_admin else None,
            }
            await firestore.set_document(
                USERS,
                payload.uid,
                profile | {"createdAt": SERVER_TIMESTAMP, "updatedAt": SERVER_TIMESTAMP},
            )
            logger.info("Created user document for %s", payload.uid)

            if is_super_admin:
                await _ensure_dev_company(firestore, payload.uid)

        await _sync_claims(auth_service, payload.uid, profile)
        return ActionResult()

    except Exception as e:
        logger.exception("Error ensuring user document for %s", payload.uid)
        return action_failure("Failed to ensure user document", e)
