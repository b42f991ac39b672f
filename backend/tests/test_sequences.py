"""Sequence allocator tests."""

import asyncio

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from ledger_api.models import Base, Counter
from ledger_api.services.sequence_service import SequenceAllocator


@pytest.mark.asyncio
async def test_first_allocation_returns_one(db):
    assert await SequenceAllocator(db).allocate("accountId") == 1


@pytest.mark.asyncio
async def test_sequential_allocations_increase_by_one(db):
    allocator = SequenceAllocator(db)
    values = [await allocator.allocate("accountId") for _ in range(5)]
    assert values == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_sequences_are_independent(db):
    allocator = SequenceAllocator(db)
    await allocator.allocate("accountId")
    await allocator.allocate("accountId")
    await allocator.allocate("accountId")

    assert await allocator.allocate("transactionId") == 1
    assert await allocator.allocate("accountId") == 4


@pytest.mark.asyncio
async def test_allocation_is_durable_across_sessions(session_factory):
    async with session_factory() as session:
        await SequenceAllocator(session).allocate("transactionId")
        await SequenceAllocator(session).allocate("transactionId")

    async with session_factory() as session:
        assert await SequenceAllocator(session).allocate("transactionId") == 3
        counter = (
            await session.execute(select(Counter).where(Counter.name == "transactionId"))
        ).scalar_one()
        assert counter.seq == 3


@pytest.mark.asyncio
async def test_empty_name_is_rejected(db):
    with pytest.raises(ValueError):
        await SequenceAllocator(db).allocate("")


@pytest.mark.asyncio
async def test_concurrent_allocations_never_repeat(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'sequences.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def allocate() -> int:
        async with factory() as session:
            return await SequenceAllocator(session).allocate("accountId")

    try:
        values = await asyncio.gather(*(allocate() for _ in range(20)))
    finally:
        await engine.dispose()

    assert sorted(values) == list(range(1, 21))
