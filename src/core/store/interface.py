from abc import ABC, abstractmethod

from core.config import Config
from core.models import Submission


class SubmissionsStore(ABC):
    @abstractmethod
    def list(self, form_name: str) -> list[Submission]:
        """Return every submission of ``form_name``, or [] when the form does not exist."""

    @abstractmethod
    def create(self, form_name: str, fields: dict[str, str]) -> None: ...

    @abstractmethod
    def delete(self, submission_id: str) -> None: ...


def get_submissions_store(config: Config | None = None) -> SubmissionsStore:
    from core.clients import get_http_client
    from core.config import get_config, resolve_secret

    config = config or get_config()

    from core.store.netlify_store import NetlifySubmissionsStore

    return NetlifySubmissionsStore(
        access_token=resolve_secret(
            config.netlify_access_token, config.netlify_access_token_secret_arn, config.aws_region
        ),
        site_id=config.site_id,
        api_url=config.netlify_api_url,
        form_post_url=config.status_form_url,
        client=get_http_client(config.http_timeout_seconds),
    )
