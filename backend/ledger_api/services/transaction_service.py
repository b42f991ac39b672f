"""Transaction management service."""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_api.core.exceptions import NotFoundError
from ledger_api.models.transaction import Transaction
from ledger_api.schemas.transaction import TransactionCreate, TransactionUpdate
from ledger_api.services.balance_service import BalanceRecalculator
from ledger_api.services.sequence_service import TRANSACTION_SEQUENCE, SequenceAllocator

logger = structlog.get_logger()


class TransactionService:
    """Transaction CRUD; creates and updates refresh the owner's balance.

    The transaction write is committed before the balance is recomputed. If
    the recomputation fails the transaction stays stored and the balance
    stays stale until the next write for that account.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.sequences = SequenceAllocator(db)
        self.balances = BalanceRecalculator(db)

    async def list_transactions(self) -> list[Transaction]:
        result = await self.db.execute(select(Transaction).order_by(Transaction.id))
        return list(result.scalars().all())

    async def create_transaction(self, data: TransactionCreate) -> Transaction:
        """Create a transaction with the next ``transactionId`` value."""
        txn_id = await self.sequences.allocate(TRANSACTION_SEQUENCE)
        txn = Transaction(id=txn_id, **data.model_dump())
        self.db.add(txn)
        await self.db.commit()
        logger.info("transaction_created", oid=txn.oid, id=txn.id, owner=txn.user_id, value=txn.value)

        await self.balances.recalculate(txn.user_id)
        await self.db.commit()
        return txn

    async def get_transaction(self, oid: str) -> Transaction:
        txn = await self.db.get(Transaction, oid)
        if txn is None:
            raise NotFoundError("Transaction")
        return txn

    async def update_transaction(self, oid: str, data: TransactionUpdate) -> Transaction:
        """Shallow-merge ``data`` into the stored transaction.

        The balance refreshed is that of the owner after the merge, i.e. the
        ``userId`` in the payload when one is given. When the owner changes,
        the previous owner's balance is not refreshed.
        """
        txn = await self.get_transaction(oid)
        update_data = data.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(txn, key, value)
        await self.db.commit()
        logger.info("transaction_updated", oid=oid, fields=sorted(update_data))

        await self.balances.recalculate(txn.user_id)
        await self.db.commit()
        return txn

    async def delete_transaction(self, oid: str) -> None:
        """Delete a transaction without touching its owner's balance."""
        txn = await self.get_transaction(oid)
        await self.db.delete(txn)
        await self.db.commit()
        logger.info("transaction_deleted", oid=oid, owner=txn.user_id)
