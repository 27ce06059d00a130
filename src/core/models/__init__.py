"""
Pydantic models for the booking admin API.
"""

from core.models.booking import (
    ActionRequest,
    EmailNotification,
    ListingResult,
    MergedItem,
    StatusInfo,
    Submission,
)

__all__ = ["ActionRequest", "EmailNotification", "ListingResult", "MergedItem", "StatusInfo", "Submission"]
