"""Firebase Auth: custom claims and ID token verification."""

import asyncio
import logging
from typing import Any

from firebase_admin import auth

from db.firebase import get_firebase_app

logger = logging.getLogger(__name__)

# Raised by verify_id_token for tokens that must be rejected
INVALID_TOKEN_ERRORS = (
    auth.InvalidIdTokenError,
    auth.ExpiredIdTokenError,
    auth.RevokedIdTokenError,
    auth.UserDisabledError,
    ValueError,
)


class AuthService:
    """Thin async wrapper around firebase_admin.auth."""

    def __init__(self) -> None:
        self.app = get_firebase_app()

    async def get_custom_claims(self, uid: str) -> dict[str, Any]:
        """Current custom claims of a user (empty dict when none)."""
        user = await asyncio.to_thread(auth.get_user, uid, app=self.app)
        return dict(user.custom_claims or {})

    async def set_custom_claims(self, uid: str, claims: dict[str, Any]) -> None:
        """Replace the custom claims of a user."""
        await asyncio.to_thread(
            auth.set_custom_user_claims, uid, claims, app=self.app
        )
        logger.info("Custom claims for user %s set: %s", uid, claims)

    async def merge_custom_claims(self, uid: str, updates: dict[str, Any]) -> None:
        """Overlay ``updates`` on the existing claims."""
        claims = await self.get_custom_claims(uid)
        claims.update(updates)
        await self.set_custom_claims(uid, claims)

    async def verify_id_token(self, id_token: str) -> dict[str, Any]:
        """Decode and verify a Firebase ID token."""
        return await asyncio.to_thread(auth.verify_id_token, id_token, app=self.app)
