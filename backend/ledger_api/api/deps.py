"""Shared API dependencies."""

from ledger_api.core.database import get_db

__all__ = ["get_db"]
