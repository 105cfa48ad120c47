"""FastAPI dependency injection for services.

Services are cached with @lru_cache() to avoid recreation per request.
Actions take their services as parameters, so tests pass fakes directly.
"""

import logging
from functools import lru_cache

from fastapi import Depends, Header, HTTPException

from db import AuthService, FirestoreService, StorageService
from db.auth import INVALID_TOKEN_ERRORS
from llm import BaseLLMService, LLMService
from responses import ResponseCode, error_dict

logger = logging.getLogger(__name__)

# --- Cached Singletons ---


@lru_cache
def get_firestore_service() -> FirestoreService:
    """Get cached Firestore service."""
    return FirestoreService()


@lru_cache
def get_storage_service() -> StorageService:
    """Get cached Cloud Storage service."""
    return StorageService()


@lru_cache
def get_auth_service() -> AuthService:
    """Get cached Firebase Auth service."""
    return AuthService()


@lru_cache
def get_llm_service() -> BaseLLMService:
    """Get cached LLM service (expensive - has API client)."""
    return LLMService()


# --- Authentication ---


async def get_current_uid(
    authorization: str | None = Header(default=None),
    auth_service: AuthService = Depends(get_auth_service),
) -> str:
    """Resolve the caller's uid from a ``Bearer <Firebase ID token>`` header."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(
            status_code=401,
            detail=error_dict(ResponseCode.UNAUTHORIZED, "Missing bearer token"),
        )

    try:
        decoded = await auth_service.verify_id_token(token)
    except INVALID_TOKEN_ERRORS as e:
        logger.warning("Rejected ID token: %s", e)
        raise HTTPException(
            status_code=401,
            detail=error_dict(ResponseCode.UNAUTHORIZED, "Invalid or expired token"),
        ) from e

    return decoded["uid"]
