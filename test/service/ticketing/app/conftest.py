from unittest.mock import AsyncMock

import pytest

from ticketing_fakes import FakeUnitOfWork


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def notification_sender() -> AsyncMock:
    return AsyncMock()
