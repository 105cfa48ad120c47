"""POST /jobs/tracking-link and /jobs/triage-link - Issue customer links."""

import logging
import uuid
from datetime import UTC, datetime, timedelta

from fastapi import Depends
from pydantic import Field, ValidationError

from apps.jobs.helpers import NOT_PERMITTED, get_company_job
from config import get_settings
from db import JOBS, FirestoreService, app_collection
from dependencies import get_firestore_service
from models import CamelModel
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)


class GenerateTrackingLinkInput(CamelModel):
    job_id: str = Field(..., min_length=1)
    company_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)


class GenerateTriageLinkInput(GenerateTrackingLinkInput):
    pass


def tracking_url(token: str, app_id: str) -> str:
    return f"/track/{token}?appId={app_id}"


def triage_url(token: str, app_id: str) -> str:
    return f"/triage/{token}?appId={app_id}"


async def _store_token(
    firestore: FirestoreService,
    payload: GenerateTrackingLinkInput,
    field: str,
    ttl_hours: int,
) -> str | None:
    """Write a fresh token and its expiry to ``field``; None if not permitted."""
    job = await get_company_job(
        firestore, payload.app_id, payload.job_id, payload.company_id
    )
    if job is None:
        return None

    token = str(uuid.uuid4())
    expires_at = datetime.now(UTC) + timedelta(hours=ttl_hours)
    await firestore.update_document(
        app_collection(payload.app_id, JOBS),
        payload.job_id,
        {field: token, f"{field}ExpiresAt": expires_at.isoformat()},
    )
    return token


async def generate_tracking_link(
    payload: GenerateTrackingLinkInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Store a random token on the job and return ``{"trackingUrl": ...}``.

    The token expires after ``tracking_link_ttl_hours``.
    """
    try:
        payload = GenerateTrackingLinkInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        token = await _store_token(
            firestore,
            payload,
            "trackingToken",
            get_settings().tracking_link_ttl_hours,
        )
        if token is None:
            return ActionResult(error=NOT_PERMITTED.format(action="modify"))

        logger.info("Tracking link issued for job %s", payload.job_id)
        return ActionResult(data={"trackingUrl": tracking_url(token, payload.app_id)})

    except Exception as e:
        logger.exception("Error generating tracking link for job %s", payload.job_id)
        return action_failure("Failed to generate tracking link", e)


async def generate_triage_link(
    payload: GenerateTriageLinkInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Issue a link the customer uses to upload photos before the visit.

    Returns ``{"triageUrl": ...}``; the token is single use.
    """
    try:
        payload = GenerateTriageLinkInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        token = await _store_token(
            firestore,
            payload,
            "triageToken",
            get_settings().triage_link_ttl_hours,
        )
        if token is None:
            return ActionResult(error=NOT_PERMITTED.format(action="modify"))

        logger.info("Triage link issued for job %s", payload.job_id)
        return ActionResult(data={"triageUrl": triage_url(token, payload.app_id)})

    except Exception as e:
        logger.exception("Error generating triage link for job %s", payload.job_id)
        return action_failure("Failed to generate triage link", e)
