"""SQLAlchemy models."""

from ledger_api.models.account import Account
from ledger_api.models.base import Base
from ledger_api.models.counter import Counter
from ledger_api.models.transaction import Transaction

__all__ = [
    "Base",
    "Account",
    "Counter",
    "Transaction",
]
