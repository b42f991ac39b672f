"""Named sequence allocation (auto-increment style integer ids)."""

import structlog
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_api.core.exceptions import STORE_UNAVAILABLE_ERRORS, StoreUnavailableError
from ledger_api.models.counter import Counter

logger = structlog.get_logger()

ACCOUNT_SEQUENCE = "accountId"
TRANSACTION_SEQUENCE = "transactionId"

# Dialects offering INSERT ... ON CONFLICT DO UPDATE ... RETURNING
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SequenceAllocator:
    """Issue strictly increasing integers per sequence name.

    Each allocation is a single upsert statement: the counter row is created
    at 1 for an unseen name, otherwise incremented in place, and the new
    value is returned by the same statement. Concurrent callers therefore
    never observe the same value. The increment is committed immediately,
    so a value is never reissued even if the caller later fails.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def allocate(self, sequence_name: str) -> int:
        if not sequence_name:
            raise ValueError("Sequence name must not be empty")

        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise RuntimeError(f"Atomic sequence allocation is not supported on {dialect}")

        stmt = (
            insert(Counter)
            .values(name=sequence_name, seq=1)
            .on_conflict_do_update(
                index_elements=[Counter.name],
                set_={"seq": Counter.seq + 1},
            )
            .returning(Counter.seq)
        )
        try:
            result = await self.db.execute(stmt)
            value = result.scalar_one()
            await self.db.commit()
        except STORE_UNAVAILABLE_ERRORS as e:
            logger.error("store_error", operation="allocate", sequence=sequence_name, error=str(e))
            raise StoreUnavailableError(str(e)) from e

        logger.info("sequence_allocated", sequence=sequence_name, value=value)
        return value
