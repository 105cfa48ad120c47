"""POST/PUT /technicians - Create and update technician profiles."""

import logging

from fastapi import Depends, Query
from google.cloud.firestore import SERVER_TIMESTAMP
from pydantic import EmailStr, Field, ValidationError, field_validator

from db import TECHNICIANS, FirestoreService, app_collection
from dependencies import get_firestore_service
from models import CamelModel, Location
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)


# --- Request Schemas ---


class TechnicianData(CamelModel):
    company_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: EmailStr | None = None
    phone: str | None = None
    skills: list[str] = Field(default_factory=list)
    is_available: bool
    location: Location
    avatar_url: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class AddTechnicianInput(TechnicianData):
    pass


class UpdateTechnicianInput(TechnicianData):
    id: str = Field(..., min_length=1)


# --- Handlers ---


async def add_technician(
    payload: AddTechnicianInput,
    app_id: str = Query(..., alias="appId"),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Create a technician; returns ``{"id": ...}``."""
    try:
        payload = AddTechnicianInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        if not app_id:
            raise ValueError("App ID is required")

        document = payload.to_document()
        document.update(
            {
                "currentJobId": None,
                "createdAt": SERVER_TIMESTAMP,
                "updatedAt": SERVER_TIMESTAMP,
            }
        )
        tech_id = await firestore.add_document(
            app_collection(app_id, TECHNICIANS), document
        )
        logger.info("Technician %s added to company %s", tech_id, payload.company_id)
        return ActionResult(data={"id": tech_id})

    except Exception as e:
        logger.exception("Error adding technician")
        return action_failure("Failed to add technician", e)


async def update_technician(
    payload: UpdateTechnicianInput,
    app_id: str = Query(..., alias="appId"),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    try:
        payload = UpdateTechnicianInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        if not app_id:
            raise ValueError("App ID is required")

        document = payload.to_document(exclude={"id"})
        document["updatedAt"] = SERVER_TIMESTAMP
        await firestore.update_document(
            app_collection(app_id, TECHNICIANS), payload.id, document
        )
        logger.info("Technician %s updated", payload.id)
        return ActionResult()

    except Exception as e:
        logger.exception("Error updating technician %s", payload.id)
        return action_failure("Failed to update technician", e)
