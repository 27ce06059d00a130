"""Outbound customer notification layer."""

from core.notify.interface import Notifier, get_notifier
from core.notify.smtp_notifier import SmtpNotifier

__all__ = ["Notifier", "SmtpNotifier", "get_notifier"]
