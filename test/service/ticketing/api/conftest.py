"""
API test client

Each test gets its own SQLite file. The lifespan below stands in for the
production one: it points the container's session maker at that file and
wires the controllers, without tracing or the global engine.
"""

from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import attrs
from dependency_injector import providers
from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app
from src.platform.config import di
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import AsyncEngineManager, create_db_and_tables


@attrs.define
class ApiContext:
    client: TestClient
    seed: Any = None


@pytest.fixture
def api(tmp_path: Path, seed_rows) -> Iterator[ApiContext]:
    manager = AsyncEngineManager(url=f'sqlite+aiosqlite:///{tmp_path / "api.db"}')
    context = ApiContext(client=None)  # type: ignore[arg-type]

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await create_db_and_tables(manager)
        context.seed = await seed_rows(manager.get_session_maker())
        di.container.session_maker.override(providers.Object(manager.get_session_maker()))
        di.setup()
        di.container.wire(modules=WIRE_MODULES)
        yield
        di.container.unwire()
        di.container.session_maker.reset_override()
        di.cleanup()
        await manager.dispose()

    with TestClient(create_app(lifespan=lifespan, title_suffix=' (test)')) as client:
        context.client = client
        yield context
