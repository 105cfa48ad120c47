"""GET /jobs/{job_id}/invoice - Download the job's invoice as PDF."""

import logging

from fastapi import Depends, HTTPException, Query
from fastapi.responses import Response

from apps.jobs.helpers import NOT_PERMITTED, get_company_job
from db import COMPANIES, FirestoreService
from dependencies import get_firestore_service
from models import Company, Job
from responses import (
    ActionResult,
    ResponseCode,
    action_failure,
    error_dict,
    get_http_status,
)
from services import invoice_filename, render_invoice_pdf

logger = logging.getLogger(__name__)

JOB_NOT_FOUND = NOT_PERMITTED.format(action="invoice")
COMPANY_NOT_FOUND = "Company not found."


async def generate_invoice(
    job_id: str,
    company_id: str,
    app_id: str,
    firestore: FirestoreService,
) -> ActionResult:
    """Render the invoice; ``data`` holds ``filename`` and ``content`` bytes."""
    try:
        job_doc = await get_company_job(firestore, app_id, job_id, company_id)
        if job_doc is None:
            return ActionResult(error=JOB_NOT_FOUND)
        company_doc = await firestore.get_document(COMPANIES, company_id)
        if company_doc is None:
            return ActionResult(error=COMPANY_NOT_FOUND)

        job = Job.model_validate(job_doc)
        company = Company.model_validate(company_doc)
        content = render_invoice_pdf(job, company)
        return ActionResult(
            data={"filename": invoice_filename(job.id), "content": content}
        )

    except Exception as e:
        logger.exception("Error generating invoice for job %s", job_id)
        return action_failure("Failed to generate invoice", e)


async def download_invoice(
    job_id: str,
    company_id: str = Query(..., alias="companyId"),
    app_id: str = Query(..., alias="appId"),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> Response:
    result = await generate_invoice(job_id, company_id, app_id, firestore)
    if not result.ok:
        code = (
            ResponseCode.NOT_FOUND
            if result.error in (JOB_NOT_FOUND, COMPANY_NOT_FOUND)
            else ResponseCode.INTERNAL_ERROR
        )
        raise HTTPException(
            status_code=get_http_status(code), detail=error_dict(code, result.error)
        )

    return Response(
        content=result.data["content"],
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{result.data["filename"]}"'
        },
    )
