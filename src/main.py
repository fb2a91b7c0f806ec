"""
Production FastAPI Application

    uvicorn src.main:app --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config import di
from src.platform.config.core_setting import settings
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import (
    create_db_and_tables,
    get_engine,
    get_engine_manager,
)
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


tracing = TracingConfig(service_name='ticketify-api')


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Ticketify] Starting up...')

    tracing.setup()
    Logger.base.info('📊 [Ticketify] OpenTelemetry tracing configured')

    di.setup()
    di.container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ticketify] Dependency injection wired')

    tracing.instrument_sqlalchemy(engine=get_engine())
    if settings.DB_CREATE_TABLES_ON_STARTUP:
        await create_db_and_tables()
    Logger.base.info('🗄️  [Ticketify] Database engine ready')

    yield

    Logger.base.info('🛑 [Ticketify] Shutting down...')
    await get_engine_manager().dispose()
    tracing.shutdown()
    di.container.unwire()
    di.cleanup()
    Logger.base.info('👋 [Ticketify] Shutdown complete')


app = create_app(lifespan=lifespan, tracing_config=tracing)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
