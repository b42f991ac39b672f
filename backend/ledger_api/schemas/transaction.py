"""Transaction schemas for request/response validation."""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import Field, field_serializer, model_validator

from ledger_api.models.base import DEFAULT_CURRENCY
from ledger_api.schemas.base import CamelModel, StoredRecord, reject_nulls


def utc_now_iso() -> str:
    """ISO-8601 timestamp for a transaction created without a date."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TransactionCreate(CamelModel):
    type: str = "defaultType"
    date: str = Field(default_factory=utc_now_iso)  # evaluated per record
    value: float = 0
    currency: str = DEFAULT_CURRENCY
    file_base64: str = ""
    file_name: str = ""
    user_id: UUID  # owner account _id

    @field_serializer("user_id")
    def owner_as_str(self, user_id: UUID) -> str:
        return str(user_id)


class TransactionUpdate(CamelModel):
    """Partial transaction; only fields present in the payload are merged."""

    type: str | None = None
    date: str | None = None
    value: float | None = None
    currency: str | None = None
    file_base64: str | None = None
    file_name: str | None = None
    user_id: UUID | None = None

    @model_validator(mode="before")
    @classmethod
    def no_nulls(cls, values):
        return reject_nulls(values)

    @field_serializer("user_id")
    def owner_as_str(self, user_id: UUID | None) -> str | None:
        return str(user_id) if user_id is not None else None


class TransactionResponse(StoredRecord):
    type: str
    date: str
    value: float
    currency: str
    file_base64: str
    file_name: str
    user_id: str
