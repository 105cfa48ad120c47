"""Firestore document schemas shared across apps.

These describe the structure of stored documents, not request bodies.
"""

from models.chat import ChatMessage
from models.common import Attachment, CamelModel, Location
from models.company import BusinessHours, Company, CompanySettings
from models.job import Job, JobFlexibility, JobPriority, JobStatus
from models.technician import (
    PROFILE_FIELDS,
    ProfileChangeRequest,
    ProfileChangeStatus,
    Technician,
)
from models.user import OnboardingStatus, UserProfile, UserRole

__all__ = [
    "Attachment",
    "BusinessHours",
    "CamelModel",
    "ChatMessage",
    "Company",
    "CompanySettings",
    "Job",
    "JobFlexibility",
    "JobPriority",
    "JobStatus",
    "Location",
    "OnboardingStatus",
    "PROFILE_FIELDS",
    "ProfileChangeRequest",
    "ProfileChangeStatus",
    "Technician",
    "UserProfile",
    "UserRole",
]
