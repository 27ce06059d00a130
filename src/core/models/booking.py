from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Submission(BaseModel):
    """A raw form submission as returned by the store."""

    id: str
    created_at: str | None = None
    data: dict[str, Any] | None = None
    fields: dict[str, Any] | None = None

    @property
    def values(self) -> dict[str, Any]:
        return self.data or self.fields or {}

    def text(self, key: str) -> str:
        value = self.values.get(key)
        return "" if value is None else str(value)


class StatusInfo(BaseModel):
    status: str
    message: str = ""
    updated_at: str | None = None


class MergedItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    created_at: str | None = None
    name: str = ""
    email: str = ""
    phone: str = ""
    service: str = ""
    start: str = ""
    end: str = ""
    full_day: str = Field(default="no", alias="fullDay")
    status: str = "pending"
    admin_note: str = ""


class ListingResult(BaseModel):
    ok: bool = True
    total: int
    pending: int
    approved: int
    denied: int
    items: list[MergedItem]


class ActionRequest(BaseModel):
    """POST body sent by the admin UI. Unknown keys are kept."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    action: str = ""
    id: str = ""
    customer_email: str = Field(default="", alias="customerEmail")
    customer_name: str = Field(default="", alias="customerName")
    service: str = ""
    start: str = ""
    end: str = ""
    message: str = ""

    @field_validator(
        "action", "id", "customer_email", "customer_name", "service", "start", "end", "message", mode="before"
    )
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        return "" if value is None else str(value)


class EmailNotification(BaseModel):
    to: str = Field(..., min_length=1)
    cc: list[str] = []
    subject: str
    text: str
