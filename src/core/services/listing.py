"""Booking listing. Joins bookings with their latest status record."""

import logging
from datetime import datetime, timezone

from core.models import ListingResult, MergedItem, StatusInfo, Submission
from core.store import SubmissionsStore

logger = logging.getLogger(__name__)

BOOKING_FORM = "booking"
STATUS_FORM = "booking-status"


def build_status_map(statuses: list[Submission]) -> dict[str, StatusInfo]:
    """Map booking id -> status info, scanning in store order.

    A later record for the same booking overwrites an earlier one regardless
    of its ``created_at``.
    """
    status_map: dict[str, StatusInfo] = {}
    for submission in statuses:
        booking_id = submission.text("booking_id") or submission.text("id")
        if not booking_id:
            continue
        status_map[booking_id] = StatusInfo(
            status=submission.text("status").lower(),
            message=submission.text("message"),
            updated_at=submission.created_at,
        )
    return status_map


def merge_booking(booking: Submission, status: StatusInfo | None) -> MergedItem:
    return MergedItem(
        id=booking.id,
        created_at=booking.created_at,
        name=booking.text("name"),
        email=booking.text("email"),
        phone=booking.text("phone"),
        service=booking.text("service"),
        start=booking.text("start"),
        end=booking.text("end"),
        full_day=booking.text("fullDay") or "no",
        status=(status.status if status else "") or booking.text("status") or "pending",
        admin_note=status.message if status else "",
    )


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def sort_newest_first(items: list[MergedItem]) -> list[MergedItem]:
    """Newest ``created_at`` first; items without a parsable timestamp go last, in input order."""
    dated: list[tuple[datetime, MergedItem]] = []
    undated: list[MergedItem] = []
    for item in items:
        parsed = _parse_timestamp(item.created_at)
        if parsed is None:
            undated.append(item)
        else:
            dated.append((parsed, item))
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [item for _, item in dated] + undated


def summarize(items: list[MergedItem]) -> ListingResult:
    def count(status: str) -> int:
        return sum(1 for item in items if (item.status or "pending").lower() == status)

    return ListingResult(
        total=len(items),
        pending=count("pending"),
        approved=count("approved"),
        denied=count("denied"),
        items=items,
    )


def list_bookings(store: SubmissionsStore) -> ListingResult:
    bookings = store.list(BOOKING_FORM)
    statuses = store.list(STATUS_FORM)

    status_map = build_status_map(statuses)
    items = sort_newest_first([merge_booking(b, status_map.get(b.id)) for b in bookings])

    result = summarize(items)
    logger.info(
        "Listed %d bookings: %d pending, %d approved, %d denied",
        result.total,
        result.pending,
        result.approved,
        result.denied,
    )
    return result
