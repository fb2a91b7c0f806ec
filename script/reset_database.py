#!/usr/bin/env python3
"""
Database Reset Script
Reset the database schema

Features:
1. Drop all tables known to the metadata
2. Recreate the latest schema from the SQLAlchemy models

Notes:
- This script only resets database structure, does not seed data
- To seed demo data, run `python script/seed_data.py`
"""

import asyncio

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Base, get_engine, get_engine_manager


async def drop_and_recreate_tables() -> None:
    # Register every model on Base.metadata
    import src.service.ticketing.driven_adapter.model  # noqa: F401

    print(f'Database URL: {settings.DATABASE_URL_ASYNC}')

    async with get_engine().begin() as conn:
        print('🗑️ Dropping tables...')
        await conn.run_sync(Base.metadata.drop_all)
        print(f'   ✅ Dropped {len(Base.metadata.tables)} tables')

        print('🏗️ Creating tables...')
        await conn.run_sync(Base.metadata.create_all)
        print(f'   ✅ Created: {", ".join(sorted(Base.metadata.tables))}')


async def main() -> None:
    print('🔄 Starting database reset...')
    print('=' * 50)

    try:
        await drop_and_recreate_tables()
        print()
        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed demo data, run: python script/seed_data.py')
    except Exception as e:
        print(f'❌ Reset failed: {e}')
        exit(1)
    finally:
        await get_engine_manager().dispose()


if __name__ == '__main__':
    asyncio.run(main())
