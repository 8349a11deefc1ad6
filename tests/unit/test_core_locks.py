"""Unit tests for KeyedLock."""

import asyncio

import pytest

from streetcode.core.locks import KeyedLock


@pytest.mark.asyncio
async def test_same_key_is_serialized():
    """Second holder of a key waits for the first."""
    locks = KeyedLock()
    events: list[str] = []

    async def worker(name: str, pause: float) -> None:
        async with locks.hold(7):
            events.append(f"{name}-start")
            await asyncio.sleep(pause)
            events.append(f"{name}-end")

    await asyncio.gather(worker("a", 0.02), worker("b", 0))

    assert events == ["a-start", "a-end", "b-start", "b-end"]


@pytest.mark.asyncio
async def test_different_keys_do_not_block():
    locks = KeyedLock()

    async with locks.hold(1):
        async with locks.hold(2):
            assert locks.is_locked(1)
            assert locks.is_locked(2)


@pytest.mark.asyncio
async def test_unused_locks_are_dropped():
    locks = KeyedLock()

    async with locks.hold("x"):
        assert len(locks) == 1

    assert len(locks) == 0
    assert not locks.is_locked("x")


@pytest.mark.asyncio
async def test_lock_released_on_exception():
    locks = KeyedLock()

    with pytest.raises(RuntimeError):
        async with locks.hold(3):
            raise RuntimeError("fail inside")

    assert not locks.is_locked(3)
    assert len(locks) == 0
