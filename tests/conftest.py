"""
Shared fixtures for the investing test suite.

Every test gets a fresh in-memory ledger so no state leaks between tests.
"""

from unittest.mock import AsyncMock

import pytest

from proprials.application.investing.locking import KeyedLocks
from proprials.domain.investing.ports import LedgerEventPublisher
from proprials.infrastructure.investing.in_memory_ledger import InMemoryLedgerRepository
from proprials.shared.security.rate_limiting import limiter

limiter.enabled = False


@pytest.fixture
def ledger() -> InMemoryLedgerRepository:
    return InMemoryLedgerRepository()


@pytest.fixture
def locks() -> KeyedLocks:
    return KeyedLocks()


@pytest.fixture
def publisher() -> AsyncMock:
    return AsyncMock(spec=LedgerEventPublisher)
