"""Shared test fixtures for the booking admin API."""

import json
import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from core.config import Config, _reset_config  # noqa: E402
from core.errors import ErrorCode, UpstreamError  # noqa: E402
from core.models import Submission  # noqa: E402
from core.notify import Notifier  # noqa: E402
from core.store import SubmissionsStore  # noqa: E402

ADMIN_KEY = "test-admin-key"


@pytest.fixture(autouse=True)
def _clear_config_and_secret_cache():
    _reset_config()
    yield
    _reset_config()


class FakeStore(SubmissionsStore):
    """In-memory store recording every call."""

    def __init__(self, forms: dict[str, list[dict]] | None = None):
        self.forms = forms or {}
        self.list_calls: list[str] = []
        self.created: list[tuple[str, dict[str, str]]] = []
        self.deleted: list[str] = []
        self.fail_create = False
        self.fail_delete = False

    def list(self, form_name):
        self.list_calls.append(form_name)
        return [Submission.model_validate(item) for item in self.forms.get(form_name, [])]

    def create(self, form_name, fields):
        if self.fail_create:
            raise UpstreamError(f"Failed to create {form_name} submission")
        self.created.append((form_name, fields))

    def delete(self, submission_id):
        if self.fail_delete:
            raise UpstreamError("Failed to delete submission", code=ErrorCode.DELETE_FAILED)
        self.deleted.append(submission_id)

    @property
    def call_count(self) -> int:
        return len(self.list_calls) + len(self.created) + len(self.deleted)


class FakeNotifier(Notifier):
    def __init__(self):
        self.sent = []

    def send(self, notification):
        self.sent.append(notification)


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def fake_notifier():
    return FakeNotifier()


@pytest.fixture
def app_config():
    return Config(
        aws_region="us-east-1",
        admin_key=ADMIN_KEY,
        netlify_access_token="nf-token",
        site_id="site-123",
        netlify_api_url="https://api.netlify.test/api/v1",
        status_form_url="https://site.test/",
        gmail_user="mimi@example.com",
        gmail_app_password="app-password",
        owner_email="owner@example.com",
        http_timeout_seconds=5.0,
        smtp_timeout_seconds=5.0,
        environment="test",
    )


@pytest.fixture
def make_event():
    def _make(method="GET", action=None, body=None, key=ADMIN_KEY, header_name="x-admin-key"):
        headers = {header_name: key} if key is not None else {}
        query = {"action": action} if action is not None and method != "POST" else None
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {"httpMethod": method, "headers": headers, "queryStringParameters": query, "body": body}

    return _make


@pytest.fixture
def clean_env():
    """Run with an empty environment so get_config() sees only defaults."""
    from unittest.mock import patch

    with patch.dict(os.environ, {}, clear=True):
        yield
