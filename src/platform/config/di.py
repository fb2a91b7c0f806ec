"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import get_session_maker
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.ticketing.driven_adapter.notification.log_notification_sender import (
    LogNotificationSender,
)
from src.service.ticketing.driven_adapter.repo.order_repo_impl import OrderRepoImpl
from src.service.ticketing.driven_adapter.repo.ticket_repo_impl import TicketRepoImpl
from src.service.ticketing.driven_adapter.repo.ticket_type_repo_impl import TicketTypeRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Event-loop-aware session maker; tests override this with their own database
    session_maker = providers.Callable(get_session_maker)

    # One unit of work per use case instance (fresh session per `async with`)
    unit_of_work = providers.Factory(SqlAlchemyUnitOfWork, session_factory=session_maker)

    # Read-side repositories (short-lived session per call)
    ticket_type_query_repo = providers.Factory(TicketTypeRepoImpl, session_factory=session_maker)
    order_query_repo = providers.Factory(OrderRepoImpl, session_factory=session_maker)
    ticket_query_repo = providers.Factory(TicketRepoImpl, session_factory=session_maker)

    # Outbound notifications
    notification_sender = providers.Singleton(LogNotificationSender)


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
