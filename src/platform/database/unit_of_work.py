"""
Unit of Work: one database transaction shared by the repositories of a use case

Usage:
    async with uow:
        order = await uow.orders.create(order=...)
        await uow.inventory_ledger.reserve(ticket_type_id=..., count=...)
        await uow.commit()

Leaving the block without commit() rolls everything back. Driver failures are
translated after the rollback: constraint violations into IntegrityConflictError,
rejected values into ValidationError, and lost connections or lock timeouts into
TransientError. Other driver errors (bad SQL) propagate unchanged.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Callable, Optional

from sqlalchemy.exc import DataError, DBAPIError, IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import (
    IntegrityConflictError,
    TransientError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from src.service.ticketing.app.interface.i_inventory_ledger import IInventoryLedger
    from src.service.ticketing.app.interface.i_order_repo import IOrderRepo
    from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
    from src.service.ticketing.app.interface.i_ticket_type_repo import ITicketTypeRepo


def _is_transient(exc: Any) -> bool:
    """Lost connections, lock timeouts and deadlocks; bad data or bad SQL never are."""
    if isinstance(exc, (OperationalError, TimeoutError)):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


class AbstractUnitOfWork(abc.ABC):
    inventory_ledger: IInventoryLedger
    ticket_types: ITicketTypeRepo
    orders: IOrderRepo
    tickets: ITicketRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """Opens a fresh session per `async with` block, so one instance can be reused across retries."""

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.ticketing.driven_adapter.repo.inventory_ledger_impl import (
            InventoryLedgerImpl,
        )
        from src.service.ticketing.driven_adapter.repo.order_repo_impl import OrderRepoImpl
        from src.service.ticketing.driven_adapter.repo.ticket_repo_impl import TicketRepoImpl
        from src.service.ticketing.driven_adapter.repo.ticket_type_repo_impl import (
            TicketTypeRepoImpl,
        )

        self.session = self.session_factory()
        self.inventory_ledger = InventoryLedgerImpl(session=self.session)
        self.ticket_types = TicketTypeRepoImpl(session=self.session)
        self.orders = OrderRepoImpl(session=self.session)
        self.tickets = TicketRepoImpl(session=self.session)
        await super().__aenter__()
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

        if isinstance(exc, IntegrityError):
            Logger.base.warning(f'⚠️ [UoW] Integrity conflict, rolled back: {exc.orig}')
            raise IntegrityConflictError(f'Conflicting write: {exc.orig}') from exc
        if isinstance(exc, DataError):
            Logger.base.warning(f'⚠️ [UoW] Value rejected by the store, rolled back: {exc.orig}')
            raise ValidationError(f'Value rejected by the store: {exc.orig}') from exc
        if _is_transient(exc):
            Logger.base.warning(f'⚠️ [UoW] Store unavailable, rolled back: {exc}')
            raise TransientError('Store temporarily unavailable, please retry') from exc

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('commit() called outside of `async with uow`')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
