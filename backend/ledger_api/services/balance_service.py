"""Derived account balance recomputation."""

import structlog
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_api.core.exceptions import STORE_UNAVAILABLE_ERRORS, StoreUnavailableError
from ledger_api.models.account import Account
from ledger_api.models.transaction import Transaction

logger = structlog.get_logger()


class BalanceRecalculator:
    """Recompute ``Account.balance`` as the sum of its transactions' values.

    The balance is a projection refreshed eagerly after transaction writes,
    not maintained incrementally. The sum and the write are two statements,
    so concurrent writers on one account can race; the last write wins.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def recalculate(self, account_id: str) -> None:
        """Overwrite the account's balance; an unknown account is left alone."""
        try:
            result = await self.db.execute(
                select(func.coalesce(func.sum(Transaction.value), 0)).where(
                    Transaction.user_id == account_id
                )
            )
            balance = float(result.scalar_one())

            updated = await self.db.execute(
                update(Account).where(Account.oid == account_id).values(balance=balance)
            )
        except STORE_UNAVAILABLE_ERRORS as e:
            logger.error("store_error", operation="recalculate", account=account_id, error=str(e))
            raise StoreUnavailableError(str(e)) from e

        logger.info(
            "balance_recalculated",
            account=account_id,
            balance=balance,
            matched=updated.rowcount,
        )
