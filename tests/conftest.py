import os

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from launchql.datasources import Store
from launchql.testing import created_tables


@pytest.fixture(scope='function')
async def engine() -> AsyncEngine:
    engine = create_async_engine(DATABASE_URL)
    yield engine
    await engine.dispose()


@pytest.fixture(scope='function')
async def store(engine: AsyncEngine) -> Store:
    """ A Store with empty tables """
    async with created_tables(engine):
        yield Store(engine)


# URL of the database to connect to
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite+aiosqlite://')
