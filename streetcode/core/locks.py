"""Per-key asyncio locks.

Used to serialise read-modify-write workflows that touch the same parent
(e.g. reordering the facts of one streetcode) within a single process.
Different keys never block each other.

Usage:
    locks = KeyedLock()
    async with locks.hold(streetcode_id):
        ...  # count, validate, stage, save
"""

import asyncio
from collections.abc import AsyncIterator, Hashable
from contextlib import asynccontextmanager


class KeyedLock:
    """Registry of asyncio locks keyed by an arbitrary hashable value.

    A lock is created on first use and dropped once nobody holds or
    waits on it, so the registry does not grow with every key ever seen.

    Thread Safety:
        NOT thread-safe. Intended for one event loop per process.
    """

    def __init__(self) -> None:
        self._locks: dict[Hashable, asyncio.Lock] = {}
        self._users: dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        """Hold the lock for ``key`` for the duration of the block.

        Args:
            key: Value identifying the guarded resource.
        """
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    def is_locked(self, key: Hashable) -> bool:
        """Return True if some task currently holds the lock for ``key``."""
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)
