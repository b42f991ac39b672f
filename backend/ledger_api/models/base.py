"""Declarative base and shared column helpers."""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

DEFAULT_CURRENCY = "R$"


def new_object_id() -> str:
    """Opaque store identifier for a new record."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    pass


class ObjectIdMixin:
    """Store-assigned opaque identifier, exposed on the wire as ``_id``."""

    oid: Mapped[str] = mapped_column("_id", String(36), primary_key=True, default=new_object_id)
