#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Create Tenant & Customer - one organizer tenant and one buyer
2. Create Event - one event with three ticket types (through the use case, so
   the usual validation applies)

Notes:
- Tables are created if they don't exist; run `python script/reset_database.py` first for a clean slate
"""

import asyncio
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import func, select

from src.platform.database.orm_db_setting import (
    create_db_and_tables,
    get_engine_manager,
    get_session_maker,
)
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.ticketing.app.command.manage_ticket_type_use_case import (
    ManageTicketTypeUseCase,
)
from src.service.ticketing.driven_adapter.model import (
    CustomerModel,
    EventModel,
    OrderModel,
    TenantModel,
    TicketModel,
    TicketTypeModel,
)


@dataclass
class TicketTypeConfig:
    """Ticket type seed configuration"""
    name: str
    price: Decimal
    capacity: int
    description: str


TICKET_TYPES = [
    TicketTypeConfig(name='General', price=Decimal('25.00'), capacity=500, description='Standing area'),
    TicketTypeConfig(name='Premium', price=Decimal('60.00'), capacity=100, description='Seated, front rows'),
    TicketTypeConfig(name='VIP', price=Decimal('150.00'), capacity=20, description='Lounge access'),
]


async def create_tenant_customer_event() -> tuple[int, int]:
    """Returns (customer_id, event_id)"""
    print('🏢 Creating tenant, customer and event...')
    async with get_session_maker()() as session:
        tenant = TenantModel(name='Demo Promotions', subdomain='demo', email='ops@demo.test')
        session.add(tenant)
        await session.flush()

        customer = CustomerModel(
            tenant_id=tenant.id, email='buyer@demo.test', first_name='Demo', last_name='Buyer'
        )
        event = EventModel(
            tenant_id=tenant.id,
            name='Summer Festival',
            description='Two stages, one weekend',
            venue='Riverside Park',
            status='published',
            slug='summer-festival',
        )
        session.add_all([customer, event])
        await session.commit()

        print(f'   ✅ Tenant ID={tenant.id}, Customer ID={customer.id}, Event ID={event.id}')
        return customer.id, event.id


async def create_ticket_types(event_id: int) -> None:
    print(f'🎫 Creating {len(TICKET_TYPES)} ticket types...')
    use_case = ManageTicketTypeUseCase(uow=SqlAlchemyUnitOfWork(get_session_maker()))
    for config in TICKET_TYPES:
        ticket_type = (
            await use_case.create_ticket_type(
                event_id=event_id,
                name=config.name,
                price=config.price,
                capacity=config.capacity,
                description=config.description,
            )
        ).unwrap()
        print(f'   ✅ {ticket_type.name}: ID={ticket_type.id}, {ticket_type.capacity} @ {ticket_type.price}')


async def verify_data() -> None:
    print('🔍 Verifying seeded data...')
    async with get_session_maker()() as session:
        for model in (TenantModel, CustomerModel, EventModel, TicketTypeModel, OrderModel, TicketModel):
            count = (await session.execute(select(func.count()).select_from(model))).scalar_one()
            print(f'   {model.__tablename__} count: {count}')
    print('   ✅ Data verification completed!')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await create_db_and_tables()
        customer_id, event_id = await create_tenant_customer_event()
        await create_ticket_types(event_id)
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
        print(f'📋 Order with customer_id={customer_id} against event_id={event_id}')
    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        exit(1)
    finally:
        await get_engine_manager().dispose()


if __name__ == '__main__':
    asyncio.run(main())
