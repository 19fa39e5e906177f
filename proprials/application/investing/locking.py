"""
Per-entity mutual exclusion for mutating use cases.

Each property and each wallet gets its own asyncio.Lock, so a purchase
on one listing never waits for a deposit into an unrelated wallet.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)


def property_key(property_id: str) -> str:
    return f"property:{property_id}"


def wallet_key(user_id: str) -> str:
    return f"wallet:{user_id}"


class KeyedLocks:
    """Registry of asyncio locks addressed by entity key.

    Locks are created on first use and dropped once nobody holds or
    waits on them.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    def is_locked(self, key: str) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    @asynccontextmanager
    async def hold(self, *keys: str) -> AsyncIterator[None]:
        """Hold the locks for all ``keys`` for the duration of the block.

        Keys are acquired in sorted order so two callers asking for the
        same pair can never deadlock.
        """
        ordered = sorted(set(keys))
        acquired: list[str] = []
        for key in ordered:
            self._users[key] = self._users.get(key, 0) + 1
        try:
            for key in ordered:
                lock = self._locks.setdefault(key, asyncio.Lock())
                await lock.acquire()
                acquired.append(key)
            logger.debug("Holding locks %s", ordered)
            yield
        finally:
            for key in reversed(acquired):
                self._locks[key].release()
            for key in ordered:
                self._users[key] -= 1
                if self._users[key] == 0:
                    del self._users[key]
                    self._locks.pop(key, None)
