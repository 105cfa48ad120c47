"""User routes - registers all user endpoints."""

from fastapi import APIRouter

from apps.users.handlers import (
    ensure_user_document,
    get_company_users,
    invite_user,
    remove_user_from_company,
    update_user_role,
)
from responses import ActionResult

router = APIRouter(prefix="/users", tags=["Users"])

# POST /users/ensure - First sign-in bootstrap
router.post("/ensure", response_model=ActionResult)(ensure_user_document)

# GET /users?companyId= - Company members
router.get("", response_model=ActionResult)(get_company_users)

# POST /users/invite - Invite existing user
router.post("/invite", response_model=ActionResult)(invite_user)

# PATCH /users/role - Change member role
router.patch("/role", response_model=ActionResult)(update_user_role)

# POST /users/remove - Remove member from company
router.post("/remove", response_model=ActionResult)(remove_user_from_company)
