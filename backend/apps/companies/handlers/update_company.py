"""PUT /companies/{company_id} - Update company name and settings."""

import logging

from fastapi import Depends
from google.cloud.firestore import SERVER_TIMESTAMP
from pydantic import Field, ValidationError

from db import COMPANIES, FirestoreService
from dependencies import get_firestore_service
from models import CamelModel, CompanySettings
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)


class UpdateCompanyInput(CamelModel):
    company_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=2)
    settings: CompanySettings


async def update_company(
    payload: UpdateCompanyInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Overwrite the company's name and settings block."""
    try:
        payload = UpdateCompanyInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        await firestore.update_document(
            COMPANIES,
            payload.company_id,
            {
                "name": payload.name,
                "settings": payload.settings.to_document(),
                "updatedAt": SERVER_TIMESTAMP,
            },
        )
        logger.info("Company %s settings updated", payload.company_id)
        return ActionResult()

    except Exception as e:
        logger.exception("Error updating company %s", payload.company_id)
        return action_failure("Failed to update company settings", e)
