"""User profile document schema."""

from enum import Enum

from models.common import CamelModel


class UserRole(str, Enum):
    ADMIN = "admin"
    TECHNICIAN = "technician"
    SUPER_ADMIN = "superAdmin"


class OnboardingStatus(str, Enum):
    PENDING_CREATION = "pending_creation"
    COMPLETED = "completed"


class UserProfile(CamelModel):
    """Path: users/{uid}"""

    uid: str
    email: str
    onboarding_status: OnboardingStatus = OnboardingStatus.PENDING_CREATION
    role: UserRole | None = None
    company_id: str | None = None
