"""GET/POST /triage/{token} - Customers send equipment photos before a visit.

The job's ``triageToken`` is issued by POST /jobs/triage-link. A successful
submission stores the AI triage on the job and invalidates the token.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import Depends, File, Form, Query, UploadFile
from google.cloud.firestore import DELETE_FIELD, SERVER_TIMESTAMP, ArrayUnion
from pydantic import Field, ValidationError

from apps.tracking.handlers.get_tracking_info import is_expired
from db import (
    JOBS,
    PARTS,
    FirestoreService,
    StorageService,
    app_collection,
    timestamped_path,
)
from dependencies import get_firestore_service, get_llm_service, get_storage_service
from flows import TriageJobInput, triage_job
from llm import BaseLLMService
from models import Attachment, CamelModel
from responses import ActionResult, validation_failure

logger = logging.getLogger(__name__)

INVALID_LINK = "This link is invalid or has expired."
EXPIRED_LINK = "This link has expired."


class GetTriageInfoInput(CamelModel):
    token: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)


class SubmitTriagePhotosInput(GetTriageInfoInput):
    photos: list[Attachment] = Field(..., min_length=1, max_length=10)


async def _find_job(
    firestore: FirestoreService, payload: GetTriageInfoInput
) -> tuple[dict[str, Any] | None, str | None]:
    """The job holding a live token, or the error to show the customer."""
    matches = await firestore.query_documents(
        app_collection(payload.app_id, JOBS),
        filters=[("triageToken", "==", payload.token)],
        limit=1,
    )
    if not matches:
        return None, INVALID_LINK
    job = matches[0]
    if is_expired(job.get("triageTokenExpiresAt"), datetime.now(UTC)):
        return None, EXPIRED_LINK
    return job, None


async def get_triage_info(
    payload: GetTriageInfoInput | dict[str, Any],
    firestore: FirestoreService,
) -> ActionResult:
    """Return ``{"jobTitle", "customerName"}`` for a live triage token."""
    try:
        payload = GetTriageInfoInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        job, error = await _find_job(firestore, payload)
        if job is None:
            return ActionResult(error=error)
        return ActionResult(
            data={
                "jobTitle": job.get("title", ""),
                "customerName": job.get("customerName", ""),
            }
        )

    except Exception:
        logger.exception("Error resolving triage token")
        return ActionResult(error="Failed to retrieve job information.")


async def submit_triage_photos(
    payload: SubmitTriagePhotosInput | dict[str, Any],
    firestore: FirestoreService,
    storage: StorageService,
    llm: BaseLLMService,
) -> ActionResult:
    """Upload the photos, triage them with the AI and store the result.

    The token is removed in the same update, so a link works only once.
    """
    try:
        payload = SubmitTriagePhotosInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        job, error = await _find_job(firestore, payload)
        if job is None:
            return ActionResult(error=error)
        job_id = job["id"]

        urls = []
        for photo in payload.photos:
            urls.append(
                await storage.upload_public(
                    timestamped_path("triage-photos", job_id, photo.filename),
                    photo.data,
                    photo.content_type,
                )
            )

        parts = await firestore.query_documents(
            app_collection(payload.app_id, PARTS),
            filters=[("companyId", "==", job.get("companyId"))],
            order_by="name",
        )
        triage = await triage_job(
            TriageJobInput(
                job_description=job.get("description") or job.get("title", ""),
                customer_photos=urls,
                available_parts=[p["name"] for p in parts if p.get("name")],
            ),
            llm,
        )

        await firestore.update_document(
            app_collection(payload.app_id, JOBS),
            job_id,
            {
                "triageImages": ArrayUnion(urls),
                "aiIdentifiedModel": triage.identified_equipment or None,
                "aiSuggestedParts": triage.suggested_parts,
                "aiRepairGuide": triage.repair_guide or None,
                "triageToken": DELETE_FIELD,
                "triageTokenExpiresAt": DELETE_FIELD,
                "updatedAt": SERVER_TIMESTAMP,
            },
        )
        logger.info("Triage photos processed for job %s", job_id)
        return ActionResult()

    except Exception:
        logger.exception("Error submitting triage photos")
        return ActionResult(error="An unexpected error occurred.")


async def get_triage_info_endpoint(
    token: str,
    app_id: str = Query(..., alias="appId"),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    return await get_triage_info(
        {"token": token, "app_id": app_id}, firestore=firestore
    )


async def submit_triage_photos_endpoint(
    token: str,
    app_id: str = Form(..., alias="appId"),
    photos: list[UploadFile] = File(...),
    firestore: FirestoreService = Depends(get_firestore_service),
    storage: StorageService = Depends(get_storage_service),
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    """Multipart form variant of submit_triage_photos."""
    attachments = [
        Attachment(
            filename=photo.filename or f"photo-{i}",
            content_type=photo.content_type,
            data=await photo.read(),
        )
        for i, photo in enumerate(photos, start=1)
    ]
    return await submit_triage_photos(
        {"token": token, "app_id": app_id, "photos": attachments},
        firestore=firestore,
        storage=storage,
        llm=llm,
    )
