"""Named sequence counter model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ledger_api.models.base import Base


class Counter(Base):
    """Last value issued for a named sequence (``accountId``, ``transactionId``).

    Rows are created implicitly on first allocation and never deleted.
    """

    __tablename__ = "counters"

    name: Mapped[str] = mapped_column(String(100), primary_key=True)
    seq: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
