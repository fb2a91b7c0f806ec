"""
Test Configuration and Fixtures

- Unit tests (`*_unit_test.py`, marked `unit`): mocks only, no database
- Integration tests: a fresh SQLite file per test through aiosqlite, with the
  same engine setup as production (BEGIN IMMEDIATE transactions)
"""

# =============================================================================
# Environment setup MUST happen before application imports: settings and the
# loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Nothing in the suite should reach the default Postgres settings
    default_db = Path(tempfile.gettempdir()) / 'ticketify_test_default.db'
    os.environ.setdefault('DATABASE_URL', f'sqlite+aiosqlite:///{default_db}')
    os.environ.setdefault('SERVICE_NAME', 'ticketify-test')


_early_setup_test_environment()

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from decimal import Decimal  # noqa: E402

import attrs  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

from src.platform.database.orm_db_setting import (  # noqa: E402
    AsyncEngineManager,
    create_db_and_tables,
)
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork  # noqa: E402
from src.service.ticketing.domain.entity.ticket_type_entity import TicketType  # noqa: E402
from src.service.ticketing.domain.value_object.customer_info import CustomerInfo  # noqa: E402
from src.service.ticketing.driven_adapter.model import (  # noqa: E402
    CustomerModel,
    EventModel,
    TenantModel,
)


@attrs.frozen
class SeedIds:
    tenant_id: int
    customer_id: int
    event_id: int


async def seed_tenant_customer_event(session_maker: async_sessionmaker[AsyncSession]) -> SeedIds:
    """One tenant, one customer and one event: the rows every ordering test needs."""
    async with session_maker() as session:
        tenant = TenantModel(name='Acme Live', subdomain='acme', email='ops@acme.test')
        session.add(tenant)
        await session.flush()

        customer = CustomerModel(
            tenant_id=tenant.id, email='ada@example.com', first_name='Ada', last_name='Lovelace'
        )
        event = EventModel(tenant_id=tenant.id, name='Summer Festival', venue='Main Park')
        session.add_all([customer, event])
        await session.flush()

        ids = SeedIds(tenant_id=tenant.id, customer_id=customer.id, event_id=event.id)
        await session.commit()
    return ids


@pytest.fixture
async def engine_manager(tmp_path: Path) -> AsyncGenerator[AsyncEngineManager, None]:
    manager = AsyncEngineManager(url=f'sqlite+aiosqlite:///{tmp_path / "ticketify.db"}')
    await create_db_and_tables(manager)
    yield manager
    await manager.dispose()


@pytest.fixture
def session_maker(engine_manager: AsyncEngineManager) -> async_sessionmaker[AsyncSession]:
    return engine_manager.get_session_maker()


@pytest.fixture
def uow_factory(
    session_maker: async_sessionmaker[AsyncSession],
) -> Callable[[], SqlAlchemyUnitOfWork]:
    return lambda: SqlAlchemyUnitOfWork(session_maker)


@pytest.fixture
async def seeded(session_maker: async_sessionmaker[AsyncSession]) -> SeedIds:
    return await seed_tenant_customer_event(session_maker)


@pytest.fixture
def customer(seeded: SeedIds) -> CustomerInfo:
    return CustomerInfo(
        customer_id=seeded.customer_id,
        email='ada@example.com',
        first_name='Ada',
        last_name='Lovelace',
        phone='+44 20 0000 0000',
    )


@pytest.fixture
def make_ticket_type(
    uow_factory: Callable[[], SqlAlchemyUnitOfWork], seeded: SeedIds
) -> Callable[..., Awaitable[TicketType]]:
    async def _make(*, name: str = 'General', price: str = '25.00', capacity: int = 10) -> TicketType:
        async with uow_factory() as uow:
            created = await uow.ticket_types.create(
                ticket_type=TicketType.create(
                    event_id=seeded.event_id, name=name, price=Decimal(price), capacity=capacity
                )
            )
            await uow.commit()
        return created

    return _make


@pytest.fixture
def seed_rows() -> Callable[[async_sessionmaker[AsyncSession]], Awaitable[SeedIds]]:
    """For fixtures that seed a database they create themselves."""
    return seed_tenant_customer_event
