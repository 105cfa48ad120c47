"""Platform bindings: Firestore, Cloud Storage and Firebase Auth."""

from db.auth import AuthService
from db.firestore import (
    CHAT_MESSAGES,
    COMPANIES,
    DISPATCHER_FEEDBACK,
    JOBS,
    MAX_BATCH_WRITES,
    PARTS,
    PROFILE_CHANGE_REQUESTS,
    SKILLS,
    TECHNICIANS,
    USERS,
    BatchWrite,
    FirestoreService,
    app_collection,
)
from db.storage import StorageService, timestamped_path

__all__ = [
    "AuthService",
    "BatchWrite",
    "CHAT_MESSAGES",
    "COMPANIES",
    "DISPATCHER_FEEDBACK",
    "FirestoreService",
    "JOBS",
    "MAX_BATCH_WRITES",
    "PARTS",
    "PROFILE_CHANGE_REQUESTS",
    "SKILLS",
    "StorageService",
    "TECHNICIANS",
    "USERS",
    "app_collection",
    "timestamped_path",
]
