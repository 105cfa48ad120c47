"""User handlers."""

from apps.users.handlers.ensure_user import (
    EnsureUserDocumentInput,
    ensure_user_document,
)
from apps.users.handlers.manage_members import (
    InviteUserInput,
    MemberRole,
    RemoveUserFromCompanyInput,
    UpdateUserRoleInput,
    get_company_users,
    invite_user,
    remove_user_from_company,
    update_user_role,
)

__all__ = [
    "EnsureUserDocumentInput",
    "InviteUserInput",
    "MemberRole",
    "RemoveUserFromCompanyInput",
    "UpdateUserRoleInput",
    "ensure_user_document",
    "get_company_users",
    "invite_user",
    "remove_user_from_company",
    "update_user_role",
]
