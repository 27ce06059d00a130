"""Netlify Forms backed submissions store."""

import logging
from typing import Any

import httpx

from core.errors import ConfigurationError, ErrorCode, UpstreamError, ValidationError
from core.models import Submission

from .interface import SubmissionsStore

logger = logging.getLogger(__name__)


class NetlifySubmissionsStore(SubmissionsStore):
    """Reads and deletes through the Netlify API; creates by posting the site's form endpoint."""

    def __init__(
        self,
        access_token: str,
        site_id: str,
        api_url: str,
        form_post_url: str,
        client: httpx.Client,
    ):
        self._access_token = access_token
        self._site_id = site_id
        self._api_url = api_url.rstrip("/")
        self._form_post_url = form_post_url
        self._client = client
        self._forms: list[dict[str, Any]] | None = None

    @property
    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._access_token}"}

    def _get_json(self, path: str, error_message: str) -> Any:
        try:
            response = self._client.get(f"{self._api_url}{path}", headers=self._auth_headers)
        except httpx.HTTPError as e:
            raise UpstreamError(f"{error_message}: {e}") from e
        if not response.is_success:
            logger.warning("Netlify GET %s returned %d", path, response.status_code)
            raise UpstreamError(error_message)
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(error_message) from e

    def _find_form_id(self, form_name: str) -> str | None:
        # One forms lookup serves both the booking and booking-status listings.
        if self._forms is None:
            forms = self._get_json(f"/sites/{self._site_id}/forms", "Failed to list forms")
            if not isinstance(forms, list):
                raise UpstreamError("Failed to list forms")
            self._forms = [form for form in forms if isinstance(form, dict) and form.get("id")]
        for form in self._forms:
            if form.get("name") == form_name:
                return str(form["id"])
        return None

    def list(self, form_name: str) -> list[Submission]:
        if not self._access_token or not self._site_id:
            raise ConfigurationError("Missing NETLIFY_ACCESS_TOKEN or SITE_ID env vars")

        form_id = self._find_form_id(form_name)
        if form_id is None:
            logger.info("Form %r not found on site", form_name)
            return []

        raw = self._get_json(f"/forms/{form_id}/submissions", "Failed to list submissions")
        if not isinstance(raw, list):
            raise UpstreamError("Failed to list submissions")
        return [Submission.model_validate(item) for item in raw]

    def create(self, form_name: str, fields: dict[str, str]) -> None:
        payload = {"form-name": form_name, **fields}
        try:
            response = self._client.post(
                self._form_post_url,
                data=payload,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        except httpx.HTTPError as e:
            raise UpstreamError(f"Failed to create {form_name} submission: {e}") from e
        if not response.is_success:
            logger.warning("Form post for %r returned %d", form_name, response.status_code)
            raise UpstreamError(f"Failed to create {form_name} submission")

    def delete(self, submission_id: str) -> None:
        if not self._access_token:
            raise ConfigurationError("Missing NETLIFY_ACCESS_TOKEN")
        if not submission_id:
            raise ValidationError("Missing submission id")

        try:
            response = self._client.delete(
                f"{self._api_url}/submissions/{submission_id}",
                headers=self._auth_headers,
            )
        except httpx.HTTPError as e:
            raise UpstreamError(f"Failed to delete submission: {e}", code=ErrorCode.DELETE_FAILED) from e
        if not response.is_success:
            logger.warning("Netlify DELETE submission %s returned %d", submission_id, response.status_code)
            raise UpstreamError("Failed to delete submission", code=ErrorCode.DELETE_FAILED)
        logger.info("Deleted submission %s", submission_id)
