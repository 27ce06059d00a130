from abc import ABC, abstractmethod

from core.config import Config
from core.models import EmailNotification


class Notifier(ABC):
    def ensure_configured(self) -> None:
        """Raise ConfigurationError when the notifier cannot send. Default: always ready."""

    @abstractmethod
    def send(self, notification: EmailNotification) -> None: ...


def get_notifier(config: Config | None = None) -> Notifier:
    from core.config import get_config, resolve_secret

    config = config or get_config()

    from core.notify.smtp_notifier import SmtpNotifier

    return SmtpNotifier(
        username=config.gmail_user,
        password=resolve_secret(config.gmail_app_password, config.gmail_app_password_secret_arn, config.aws_region),
        from_name=config.from_name,
        timeout=config.smtp_timeout_seconds,
    )
