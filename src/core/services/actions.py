"""Which steps each POST action runs, and in what order."""

import logging
from dataclasses import dataclass

from core.config import Config
from core.models import ActionRequest
from core.notify import Notifier
from core.services.notification import send_customer_notification
from core.services.status import record_status
from core.store import SubmissionsStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionPlan:
    records_status: bool
    notifies: bool
    deletes_submission: bool


ACTION_PLANS: dict[str, ActionPlan] = {
    "approve": ActionPlan(records_status=True, notifies=True, deletes_submission=False),
    "deny": ActionPlan(records_status=True, notifies=True, deletes_submission=False),
    "email": ActionPlan(records_status=False, notifies=True, deletes_submission=False),
    "cancel": ActionPlan(records_status=True, notifies=True, deletes_submission=True),
}


def run_action(
    action: str,
    request: ActionRequest,
    store: SubmissionsStore,
    notifier: Notifier,
    config: Config,
) -> None:
    """Run the plan for ``action``: record status, then notify, then delete.

    Steps are not rolled back. A cancel whose delete fails has already
    recorded the status and emailed the customer.
    """
    plan = ACTION_PLANS[action]

    if plan.records_status:
        record_status(action, request, store)
    if plan.notifies:
        send_customer_notification(action, request, notifier, config)
    if plan.deletes_submission:
        store.delete(request.id)

    logger.info("Action %s completed for booking %s", action, request.id)
