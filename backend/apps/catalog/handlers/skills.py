"""Skills library: GET/POST /catalog/skills, DELETE /catalog/skills/{item_id}."""

import logging
from typing import Any

from fastapi import Depends, Query
from pydantic import ValidationError

from apps.catalog.helpers import (
    AddCatalogItemInput,
    CatalogKind,
    CatalogScope,
    DeleteCatalogItemInput,
    add_item,
    delete_item,
    list_items,
)
from db import SKILLS, BatchWrite, FirestoreService, app_collection
from dependencies import get_firestore_service
from responses import ActionResult, action_failure, validation_failure
from services import PREDEFINED_SKILLS

logger = logging.getLogger(__name__)

SKILLS_KIND = CatalogKind(collection=SKILLS, label="skill")


async def get_skills(
    payload: CatalogScope | dict[str, Any],
    firestore: FirestoreService,
) -> ActionResult:
    """Skills of a company sorted by name."""
    try:
        payload = CatalogScope.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        return await list_items(SKILLS_KIND, payload, firestore)
    except Exception as e:
        logger.exception("Error fetching skills")
        return action_failure("Failed to fetch skills", e)


async def add_skill(
    payload: AddCatalogItemInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    try:
        payload = AddCatalogItemInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        return await add_item(SKILLS_KIND, payload, firestore)
    except Exception as e:
        logger.exception("Error adding skill")
        return action_failure("Failed to add skill", e)


async def delete_skill(
    payload: DeleteCatalogItemInput | dict[str, Any],
    firestore: FirestoreService,
) -> ActionResult:
    try:
        payload = DeleteCatalogItemInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        return await delete_item(SKILLS_KIND, payload, firestore)
    except Exception as e:
        logger.exception("Error deleting skill %s", payload.item_id)
        return action_failure("Failed to delete skill", e)


async def seed_skills(
    payload: CatalogScope,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Add the predefined skills the company does not have yet.

    Returns ``{"addedCount": n}``.
    """
    try:
        payload = CatalogScope.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        collection = app_collection(payload.app_id, SKILLS)
        existing = await firestore.query_documents(
            collection, filters=[("companyId", "==", payload.company_id)]
        )
        have = {doc.get("name") for doc in existing}
        writes = [
            BatchWrite(
                "set", collection, None, {"name": name, "companyId": payload.company_id}
            )
            for name in PREDEFINED_SKILLS
            if name not in have
        ]
        if writes:
            await firestore.commit_batch(writes)
        logger.info("Seeded %d skills for company %s", len(writes), payload.company_id)
        return ActionResult(data={"addedCount": len(writes)})

    except Exception as e:
        logger.exception("Error seeding skills for company %s", payload.company_id)
        return action_failure("Failed to seed skills", e)


# --- Endpoints ---


async def get_skills_endpoint(
    company_id: str = Query(..., alias="companyId"),
    app_id: str = Query(..., alias="appId"),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    return await get_skills(
        {"company_id": company_id, "app_id": app_id}, firestore=firestore
    )


async def delete_skill_endpoint(
    item_id: str,
    company_id: str = Query(..., alias="companyId"),
    app_id: str = Query(..., alias="appId"),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    return await delete_skill(
        {"item_id": item_id, "company_id": company_id, "app_id": app_id},
        firestore=firestore,
    )
