"""Composes the customer decision email and hands it to the notifier."""

from core.config import Config
from core.errors import ValidationError
from core.models import ActionRequest, EmailNotification
from core.notify import Notifier

STATUS_LABELS: dict[str, str] = {
    "approve": "Approved ✅",
    "deny": "Declined",
    "cancel": "Cancelled",
}

OPENING_LINES: dict[str, str] = {
    "approve": "Good news — your request is approved!",
    "deny": "Thanks for your request. Unfortunately I’m not available for that time.",
    "cancel": "Your booking has been cancelled per request.",
}

DEFAULT_OPENING_LINE = "Here’s an update on your request:"


def compose_subject(action: str, request: ActionRequest, from_name: str) -> str:
    label = STATUS_LABELS.get(action, "Update")
    return f"{from_name} — {label}: {request.service}"


def compose_text(action: str, request: ActionRequest) -> str:
    lines = [
        f"Hi {request.customer_name or 'there'},",
        OPENING_LINES.get(action, DEFAULT_OPENING_LINE),
        "",
        f"Service: {request.service}",
        f"When: {request.start} → {request.end}",
    ]
    note = request.message.strip()
    if note:
        lines += ["", f"Note from Mimi: {note}"]
    lines += ["", "Reply to this email if you have any questions.", "— Mimi"]
    return "\n".join(lines)


def compose_notification(
    action: str, request: ActionRequest, from_name: str, owner_email: str | None = None
) -> EmailNotification:
    to = request.customer_email.strip()
    if not to:
        raise ValidationError("No customerEmail provided")

    return EmailNotification(
        to=to,
        cc=[owner_email] if owner_email else [],
        subject=compose_subject(action, request, from_name),
        text=compose_text(action, request),
    )


def send_customer_notification(action: str, request: ActionRequest, notifier: Notifier, config: Config) -> None:
    notifier.ensure_configured()
    notification = compose_notification(action, request, config.from_name, config.owner_email)
    notifier.send(notification)
