"""Account schemas for request/response validation."""

from pydantic import model_validator

from ledger_api.models.base import DEFAULT_CURRENCY
from ledger_api.schemas.base import CamelModel, StoredRecord, reject_nulls


class AccountCreate(CamelModel):
    full_name: str = ""
    first_name: str = ""
    last_name: str = ""
    balance: float = 0
    currency: str = DEFAULT_CURRENCY


class AccountUpdate(CamelModel):
    """Partial account; only fields present in the payload are merged."""

    full_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    balance: float | None = None
    currency: str | None = None

    @model_validator(mode="before")
    @classmethod
    def no_nulls(cls, values):
        return reject_nulls(values)


class AccountResponse(StoredRecord):
    full_name: str
    first_name: str
    last_name: str
    balance: float
    currency: str
