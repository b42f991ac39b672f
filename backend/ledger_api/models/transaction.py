"""Transaction model."""

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ledger_api.models.base import DEFAULT_CURRENCY, Base, ObjectIdMixin


class Transaction(Base, ObjectIdMixin):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False, default="defaultType")
    date: Mapped[str] = mapped_column(String(40), nullable=False)  # ISO-8601
    value: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    currency: Mapped[str] = mapped_column(String(10), nullable=False, default=DEFAULT_CURRENCY)
    file_base64: Mapped[str] = mapped_column(Text, nullable=False, default="")
    file_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    # Owner account's _id; no foreign key, deleting an account leaves these orphaned
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
