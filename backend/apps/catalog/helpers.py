"""Shared list/add/delete logic for the parts and skills libraries."""

import logging
from dataclasses import dataclass

from pydantic import Field

from db import FirestoreService, app_collection
from models import CamelModel
from responses import ActionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogKind:
    """A per-company name library stored in an app-scoped collection."""

    collection: str
    label: str


class CatalogScope(CamelModel):
    company_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)


class AddCatalogItemInput(CatalogScope):
    name: str = Field(..., min_length=1)


class DeleteCatalogItemInput(CatalogScope):
    item_id: str = Field(..., min_length=1)


async def list_items(
    kind: CatalogKind, scope: CatalogScope, firestore: FirestoreService
) -> ActionResult:
    docs = await firestore.query_documents(
        app_collection(scope.app_id, kind.collection),
        filters=[("companyId", "==", scope.company_id)],
        order_by="name",
    )
    return ActionResult(data=[{"id": d["id"], "name": d.get("name", "")} for d in docs])


async def add_item(
    kind: CatalogKind, payload: AddCatalogItemInput, firestore: FirestoreService
) -> ActionResult:
    """Add a name unless the company already has it."""
    name = payload.name.strip()
    if not name:
        return ActionResult(error=f"{kind.label.capitalize()} name is required.")

    collection = app_collection(payload.app_id, kind.collection)
    existing = await firestore.query_documents(
        collection,
        filters=[("companyId", "==", payload.company_id), ("name", "==", name)],
        limit=1,
    )
    if existing:
        return ActionResult(error=f"This {kind.label} already exists in the library.")

    item_id = await firestore.add_document(
        collection, {"name": name, "companyId": payload.company_id}
    )
    logger.info("Added %s '%s' for company %s", kind.label, name, payload.company_id)
    return ActionResult(data={"id": item_id, "name": name})


async def delete_item(
    kind: CatalogKind, payload: DeleteCatalogItemInput, firestore: FirestoreService
) -> ActionResult:
    collection = app_collection(payload.app_id, kind.collection)
    item = await firestore.get_document(collection, payload.item_id)
    if item is None or item.get("companyId") != payload.company_id:
        return ActionResult(
            error=f"{kind.label.capitalize()} not found or you do not have "
            "permission to delete it."
        )

    await firestore.delete_document(collection, payload.item_id)
    logger.info("Deleted %s %s", kind.label, payload.item_id)
    return ActionResult()
