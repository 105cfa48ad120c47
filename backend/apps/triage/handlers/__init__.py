"""Triage handlers."""

from apps.triage.handlers.triage_photos import (
    GetTriageInfoInput,
    SubmitTriagePhotosInput,
    get_triage_info,
    get_triage_info_endpoint,
    submit_triage_photos,
    submit_triage_photos_endpoint,
)

__all__ = [
    "GetTriageInfoInput",
    "SubmitTriagePhotosInput",
    "get_triage_info",
    "get_triage_info_endpoint",
    "submit_triage_photos",
    "submit_triage_photos_endpoint",
]
