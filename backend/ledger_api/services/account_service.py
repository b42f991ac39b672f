"""Account management service."""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_api.config import settings
from ledger_api.core.exceptions import NotFoundError
from ledger_api.models.account import Account
from ledger_api.schemas.account import AccountCreate, AccountUpdate
from ledger_api.services.sequence_service import ACCOUNT_SEQUENCE, SequenceAllocator

logger = structlog.get_logger()

DEFAULT_ACCOUNT = AccountCreate(
    full_name="Joana da Silva Oliveira",
    first_name="Joana",
    last_name="Oliveira",
    balance=2500,
    currency="R$",
)


class AccountService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.sequences = SequenceAllocator(db)

    async def list_accounts(self) -> list[Account]:
        """List all accounts, seeding the default one into an empty collection."""
        result = await self.db.execute(select(Account).order_by(Account.id))
        accounts = list(result.scalars().all())
        if not accounts and settings.seed_default_account:
            account = await self.create_account(DEFAULT_ACCOUNT)
            logger.info("default_account_seeded", oid=account.oid, id=account.id)
            accounts = [account]
        return accounts

    async def create_account(self, data: AccountCreate) -> Account:
        """Create an account with the next ``accountId`` value."""
        account_id = await self.sequences.allocate(ACCOUNT_SEQUENCE)
        account = Account(id=account_id, **data.model_dump())
        self.db.add(account)
        await self.db.commit()
        logger.info("account_created", oid=account.oid, id=account.id)
        return account

    async def get_account(self, oid: str) -> Account:
        account = await self.db.get(Account, oid)
        if account is None:
            raise NotFoundError("Account")
        return account

    async def update_account(self, oid: str, data: AccountUpdate) -> Account:
        """Shallow-merge the fields present in ``data`` into the stored account."""
        account = await self.get_account(oid)
        update_data = data.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(account, key, value)
        await self.db.commit()
        logger.info("account_updated", oid=oid, fields=sorted(update_data))
        return account

    async def delete_account(self, oid: str) -> None:
        """Delete an account. Its transactions are kept, still pointing at it."""
        account = await self.get_account(oid)
        await self.db.delete(account)
        await self.db.commit()
        logger.info("account_deleted", oid=oid)
