"""Company routes - registers all company endpoints."""

from fastapi import APIRouter

from apps.companies.handlers import update_company
from responses import ActionResult

router = APIRouter(prefix="/companies", tags=["Companies"])

# PUT /companies - Update name and settings
router.put("", response_model=ActionResult)(update_company)
