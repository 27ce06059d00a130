"""Booking admin HTTP function: list bookings and act on them."""

import base64
import hmac
import json
import logging
from typing import Any

from core.config import Config, get_config
from core.errors import BookingAdminError, ConfigurationError, ErrorCode, ValidationError
from core.models import ActionRequest
from core.notify import get_notifier
from core.services.actions import ACTION_PLANS, run_action
from core.services.listing import list_bookings
from core.store import get_submissions_store

logger = logging.getLogger(__name__)

ADMIN_KEY_HEADER = "x-admin-key"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": f"content-type,{ADMIN_KEY_HEADER}",
}
PREFLIGHT_HEADERS = {"Access-Control-Allow-Methods": "GET,POST,OPTIONS"}


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    method = (event.get("httpMethod") or "").upper()
    if method == "OPTIONS":
        return _json(200, {"ok": True}, PREFLIGHT_HEADERS)

    try:
        config = get_config()
        if not _is_authorized(event.get("headers"), config.admin_key):
            return _json(401, {"ok": False, "error": "unauthorized"})

        if method == "GET":
            query_params = event.get("queryStringParameters") or {}
            action = (query_params.get("action") or "").lower()
            if action == "poll":
                return _json(200, {"ok": True})
            if action == "list":
                return _handle_list(config)
            return _json(400, {"ok": False, "error": "bad_action"})

        if method == "POST":
            body = _parse_body(event)
            action = str(body.get("action") or "").lower()
            if action not in ACTION_PLANS:
                return _json(400, {"ok": False, "error": "bad_action"})

            request = ActionRequest.model_validate(body)
            run_action(action, request, get_submissions_store(config), get_notifier(config), config)
            return _json(200, {"ok": True})

        return _json(405, {"ok": False, "error": "method_not_allowed"})
    except BookingAdminError as e:
        logger.exception("Admin request failed (%s)", e.code.value)
        return _json(500, {"ok": False, "error": e.message or "server_error"})
    except Exception as e:
        logger.exception("Unexpected error handling admin request")
        return _json(500, {"ok": False, "error": str(e) or "server_error"})


def _handle_list(config: Config) -> dict[str, Any]:
    try:
        result = list_bookings(get_submissions_store(config))
    except ConfigurationError as e:
        # Misconfiguration is reported without the CORS envelope.
        logger.error("Listing not configured: %s", e.message)
        return {
            "statusCode": 500,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"ok": False, "error": e.message}),
        }
    return _json(200, result.model_dump(by_alias=True))


def _is_authorized(headers: dict[str, Any] | None, admin_key: str) -> bool:
    if not admin_key:
        return False
    supplied = next(
        (str(value) for name, value in (headers or {}).items() if name.lower() == ADMIN_KEY_HEADER),
        None,
    )
    if supplied is None:
        return False
    return hmac.compare_digest(supplied.encode(), admin_key.encode())


def _parse_body(event: dict[str, Any]) -> dict[str, Any]:
    raw = event.get("body") or "{}"
    if event.get("isBase64Encoded") and event.get("body"):
        raw = base64.b64decode(raw).decode()
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError("Invalid JSON body", code=ErrorCode.INVALID_REQUEST) from e
    if not isinstance(body, dict):
        raise ValidationError("Invalid JSON body", code=ErrorCode.INVALID_REQUEST)
    return body


def _json(status_code: int, payload: dict[str, Any], extra_headers: dict[str, str] | None = None) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **CORS_HEADERS, **(extra_headers or {})},
        "body": json.dumps(payload),
    }
