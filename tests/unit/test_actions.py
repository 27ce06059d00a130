"""Unit tests for the POST action dispatch table."""

import pytest
from conftest import FakeNotifier, FakeStore

from core.errors import UpstreamError
from core.models import ActionRequest
from core.services.actions import ACTION_PLANS, ActionPlan, run_action

REQUEST = ActionRequest.model_validate(
    {"id": "B1", "customerEmail": "ann@example.com", "customerName": "Ann", "service": "Dog walk"}
)


def test_plan_table_covers_exactly_the_post_actions():
    assert set(ACTION_PLANS) == {"approve", "deny", "email", "cancel"}


def test_only_cancel_deletes():
    assert [a for a, plan in ACTION_PLANS.items() if plan.deletes_submission] == ["cancel"]


def test_email_does_not_record_status():
    assert ACTION_PLANS["email"] == ActionPlan(records_status=False, notifies=True, deletes_submission=False)


@pytest.mark.parametrize("action,status", [("approve", "approved"), ("deny", "denied")])
def test_decision_records_and_notifies(action, status, app_config):
    store, notifier = FakeStore(), FakeNotifier()
    run_action(action, REQUEST, store, notifier, app_config)

    assert [fields["status"] for _, fields in store.created] == [status]
    assert len(notifier.sent) == 1
    assert store.deleted == []


def test_email_only_notifies(app_config):
    store, notifier = FakeStore(), FakeNotifier()
    run_action("email", REQUEST, store, notifier, app_config)

    assert store.call_count == 0
    assert len(notifier.sent) == 1


def test_cancel_records_notifies_then_deletes(app_config):
    store, notifier = FakeStore(), FakeNotifier()
    run_action("cancel", REQUEST, store, notifier, app_config)

    assert store.created[0][1]["status"] == "cancelled"
    assert len(notifier.sent) == 1
    assert store.deleted == ["B1"]


def test_failed_status_record_skips_email(app_config):
    store, notifier = FakeStore(), FakeNotifier()
    store.fail_create = True

    with pytest.raises(UpstreamError, match="Failed to record status"):
        run_action("approve", REQUEST, store, notifier, app_config)

    assert notifier.sent == []


def test_cancel_delete_failure_keeps_earlier_effects(app_config):
    """Nothing is rolled back when the final delete fails."""
    store, notifier = FakeStore(), FakeNotifier()
    store.fail_delete = True

    with pytest.raises(UpstreamError, match="Failed to delete submission"):
        run_action("cancel", REQUEST, store, notifier, app_config)

    assert len(store.created) == 1
    assert len(notifier.sent) == 1
    assert store.deleted == []
