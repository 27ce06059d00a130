"""Appends a booking-status submission for an operator decision."""

import logging

from core.errors import ErrorCode, UpstreamError, ValidationError
from core.models import ActionRequest
from core.services.listing import STATUS_FORM
from core.store import SubmissionsStore

logger = logging.getLogger(__name__)

STATUS_BY_ACTION: dict[str, str] = {
    "approve": "approved",
    "deny": "denied",
    "cancel": "cancelled",
}


def status_fields(action: str, request: ActionRequest) -> dict[str, str]:
    return {
        "booking_id": request.id,
        "status": STATUS_BY_ACTION[action],
        "service": request.service,
        "start": request.start,
        "end": request.end,
        "customer": request.customer_name,
        "message": request.message,
    }


def record_status(action: str, request: ActionRequest, store: SubmissionsStore) -> None:
    """Append a status record. Only valid for approve, deny and cancel."""
    if action not in STATUS_BY_ACTION:
        raise ValidationError(f"No status for action {action!r}")
    fields = status_fields(action, request)
    try:
        store.create(STATUS_FORM, fields)
    except UpstreamError as e:
        raise UpstreamError("Failed to record status", code=ErrorCode.STATUS_RECORD_FAILED) from e
    logger.info("Recorded status %s for booking %s", fields["status"], request.id)
