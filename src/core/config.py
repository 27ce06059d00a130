from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

DEFAULT_STATUS_FORM_URL = "https://mimisanimalcare.com/"
DEFAULT_FROM_NAME = "Mimi's Animal Care"

_cached_secrets: dict[str, str] = {}


def resolve_secret(value: str, secret_arn: str | None, region: str) -> str:
    """Return ``value`` when set, else fetch ``secret_arn`` from Secrets Manager, with caching."""
    # Local dev: use env var directly
    if value:
        return value
    if not secret_arn:
        return ""

    # Deployed: fetch from Secrets Manager by ARN
    if secret_arn not in _cached_secrets:
        client = boto3.client("secretsmanager", region_name=region)
        _cached_secrets[secret_arn] = client.get_secret_value(SecretId=secret_arn)["SecretString"]
    return _cached_secrets[secret_arn]


class Config(BaseModel):
    """Process configuration.

    Only the admin key is resolved up front. The store token and mail password
    may be left as Secrets Manager ARNs; the store and notifier factories
    resolve them when those collaborators are built.
    """

    model_config = ConfigDict(frozen=True)

    aws_region: str
    admin_key: str = ""
    netlify_access_token: str = ""
    netlify_access_token_secret_arn: str | None = None
    site_id: str = ""
    netlify_api_url: str
    status_form_url: str = DEFAULT_STATUS_FORM_URL
    gmail_user: str = ""
    gmail_app_password: str = ""
    gmail_app_password_secret_arn: str | None = None
    from_name: str = DEFAULT_FROM_NAME
    owner_email: str | None = None
    http_timeout_seconds: float
    smtp_timeout_seconds: float
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config. For testing only."""
    global _cached_config
    _cached_config = None
    _cached_secrets.clear()


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    aws_region = environ.get("AWS_REGION", "us-east-1")
    _cached_config = Config(
        aws_region=aws_region,
        admin_key=resolve_secret(environ.get("ADMIN_KEY", ""), environ.get("ADMIN_KEY_SECRET_ARN"), aws_region),
        netlify_access_token=environ.get("NETLIFY_ACCESS_TOKEN", ""),
        netlify_access_token_secret_arn=environ.get("NETLIFY_ACCESS_TOKEN_SECRET_ARN") or None,
        site_id=environ.get("SITE_ID", ""),
        netlify_api_url=environ.get("NETLIFY_API_URL", "https://api.netlify.com/api/v1").rstrip("/"),
        status_form_url=environ.get("URL", "").strip() or DEFAULT_STATUS_FORM_URL,
        gmail_user=environ.get("GMAIL_USER", ""),
        gmail_app_password=environ.get("GMAIL_APP_PASSWORD", ""),
        gmail_app_password_secret_arn=environ.get("GMAIL_APP_PASSWORD_SECRET_ARN") or None,
        from_name=environ.get("FROM_NAME", "") or DEFAULT_FROM_NAME,
        owner_email=environ.get("OWNER_EMAIL") or None,
        http_timeout_seconds=float(environ.get("HTTP_TIMEOUT_SECONDS", "10")),
        smtp_timeout_seconds=float(environ.get("SMTP_TIMEOUT_SECONDS", "30")),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
