"""Parts library: GET/POST /catalog/parts, DELETE /catalog/parts/{item_id}."""

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
from db import PARTS, FirestoreService
from dependencies import get_firestore_service
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)

PARTS_KIND = CatalogKind(collection=PARTS, label="part")


async def get_parts(
    payload: CatalogScope | dict[str, Any],
    firestore: FirestoreService,
) -> ActionResult:
    """Parts of a company sorted by name."""
    try:
        payload = CatalogScope.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        return await list_items(PARTS_KIND, payload, firestore)
    except Exception as e:
        logger.exception("Error fetching parts")
        return action_failure("Failed to fetch parts", e)


async def add_part(
    payload: AddCatalogItemInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    try:
        payload = AddCatalogItemInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        return await add_item(PARTS_KIND, payload, firestore)
    except Exception as e:
        logger.exception("Error adding part")
        return action_failure("Failed to add part", e)


async def delete_part(
    payload: DeleteCatalogItemInput | dict[str, Any],
    firestore: FirestoreService,
) -> ActionResult:
    try:
        payload = DeleteCatalogItemInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        return await delete_item(PARTS_KIND, payload, firestore)
    except Exception as e:
        logger.exception("Error deleting part %s", payload.item_id)
        return action_failure("Failed to delete part", e)


# --- Endpoints ---


async def get_parts_endpoint(
    company_id: str = Query(..., alias="companyId"),
    app_id: str = Query(..., alias="appId"),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    return await get_parts(
        {"company_id": company_id, "app_id": app_id}, firestore=firestore
    )


async def delete_part_endpoint(
    item_id: str,
    company_id: str = Query(..., alias="companyId"),
    app_id: str = Query(..., alias="appId"),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    return await delete_part(
        {"item_id": item_id, "company_id": company_id, "app_id": app_id},
        firestore=firestore,
    )
