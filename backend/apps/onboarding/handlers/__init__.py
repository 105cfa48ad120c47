"""Onboarding handlers."""

from apps.onboarding.handlers.complete_onboarding import (
    CompleteOnboardingInput,
    complete_onboarding,
)

__all__ = ["CompleteOnboardingInput", "complete_onboarding"]
