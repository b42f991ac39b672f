"""Transaction API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_api.api.deps import get_db
from ledger_api.schemas.base import DeleteResponse
from ledger_api.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
)
from ledger_api.services.transaction_service import TransactionService

router = APIRouter()


@router.post("", response_model=TransactionResponse, status_code=201)
async def create_transaction(
    data: TransactionCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a transaction and refresh its owner's balance."""
    service = TransactionService(db)
    return await service.create_transaction(data)


@router.get("", response_model=list[TransactionResponse])
async def list_transactions(db: AsyncSession = Depends(get_db)):
    service = TransactionService(db)
    return await service.list_transactions()


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: str,
    db: AsyncSession = Depends(get_db),
):
    service = TransactionService(db)
    return await service.get_transaction(transaction_id)


@router.put("/{transaction_id}", response_model=TransactionResponse)
async def update_transaction(
    transaction_id: str,
    data: TransactionUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Merge the given fields into a transaction and refresh the owner's balance."""
    service = TransactionService(db)
    return await service.update_transaction(transaction_id, data)


@router.delete("/{transaction_id}", response_model=DeleteResponse)
async def delete_transaction(
    transaction_id: str,
    db: AsyncSession = Depends(get_db),
):
    service = TransactionService(db)
    await service.delete_transaction(transaction_id)
    return {"message": "Transaction deleted"}
