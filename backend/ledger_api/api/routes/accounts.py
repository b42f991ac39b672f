"""Account API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_api.api.deps import get_db
from ledger_api.schemas.account import AccountCreate, AccountResponse, AccountUpdate
from ledger_api.schemas.base import DeleteResponse
from ledger_api.services.account_service import AccountService

router = APIRouter()


@router.post("", response_model=AccountResponse, status_code=201)
async def create_account(
    data: AccountCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create an account; ``id`` is assigned from the account sequence."""
    service = AccountService(db)
    return await service.create_account(data)


@router.get("", response_model=list[AccountResponse])
async def list_accounts(db: AsyncSession = Depends(get_db)):
    """List all accounts (seeds a default account into an empty store)."""
    service = AccountService(db)
    return await service.list_accounts()


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: str,
    db: AsyncSession = Depends(get_db),
):
    service = AccountService(db)
    return await service.get_account(account_id)


@router.put("/{account_id}", response_model=AccountResponse)
async def update_account(
    account_id: str,
    data: AccountUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Merge the given fields into an account."""
    service = AccountService(db)
    return await service.update_account(account_id, data)


@router.delete("/{account_id}", response_model=DeleteResponse)
async def delete_account(
    account_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete an account. Its transactions are not deleted."""
    service = AccountService(db)
    await service.delete_account(account_id)
    return {"message": "Account deleted"}
