"""Tracking handlers."""

from apps.tracking.handlers.get_tracking_info import (
    GetTrackingInfoInput,
    PublicTrackingInfo,
    get_tracking_info,
    get_tracking_info_endpoint,
)

__all__ = [
    "GetTrackingInfoInput",
    "PublicTrackingInfo",
    "get_tracking_info",
    "get_tracking_info_endpoint",
]
