from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import (
    DataError,
    DBAPIError,
    IntegrityError,
    OperationalError,
    ProgrammingError,
)

from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.exception.exceptions import (
    IntegrityConflictError,
    TransientError,
    ValidationError,
)


def _session() -> MagicMock:
    session = MagicMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.commit = AsyncMock()
    return session


async def _raise_inside_uow(session: MagicMock, error: BaseException) -> None:
    async with SqlAlchemyUnitOfWork(lambda: session):
        raise error


@pytest.mark.unit
class TestUnitOfWorkErrorTranslation:
    @pytest.mark.asyncio
    async def test_integrity_error_becomes_retryable_conflict(self) -> None:
        session = _session()

        with pytest.raises(IntegrityConflictError) as exc_info:
            await _raise_inside_uow(
                session, IntegrityError('INSERT', {}, Exception('UNIQUE constraint failed'))
            )

        assert exc_info.value.retryable is True
        assert exc_info.value.status_code == 409
        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_data_error_is_a_validation_error_and_not_retryable(self) -> None:
        """
        Given: The store rejects a value (numeric field overflow)
        When: The unit of work exits
        Then: ValidationError (400), never flagged retryable
        """
        session = _session()

        with pytest.raises(ValidationError) as exc_info:
            await _raise_inside_uow(
                session, DataError('UPDATE', {}, Exception('numeric field overflow'))
            )

        assert exc_info.value.status_code == 400
        assert exc_info.value.retryable is False
        session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_programming_error_propagates_unchanged(self) -> None:
        session = _session()
        error = ProgrammingError('SELECT', {}, Exception('syntax error'))

        with pytest.raises(ProgrammingError) as exc_info:
            await _raise_inside_uow(session, error)

        assert exc_info.value is error
        session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_operational_error_is_transient(self) -> None:
        session = _session()

        with pytest.raises(TransientError) as exc_info:
            await _raise_inside_uow(
                session, OperationalError('UPDATE', {}, Exception('database is locked'))
            )

        assert exc_info.value.retryable is True
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_timeout_is_transient(self) -> None:
        with pytest.raises(TransientError):
            await _raise_inside_uow(_session(), TimeoutError())

    @pytest.mark.asyncio
    async def test_invalidated_connection_is_transient(self) -> None:
        error = DBAPIError(
            'SELECT', {}, Exception('connection reset'), connection_invalidated=True
        )

        with pytest.raises(TransientError):
            await _raise_inside_uow(_session(), error)

    @pytest.mark.asyncio
    async def test_other_dbapi_error_is_not_transient(self) -> None:
        error = DBAPIError('SELECT', {}, Exception('unexpected'))

        with pytest.raises(DBAPIError) as exc_info:
            await _raise_inside_uow(_session(), error)

        assert exc_info.value is error
