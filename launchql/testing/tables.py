""" Create DB structure -- for testing """

from __future__ import annotations

from contextlib import asynccontextmanager
from itertools import chain

import sqlalchemy as sa
from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine

from launchql.datasources.store import metadata as launchql_metadata


@asynccontextmanager
async def created_tables(engine: AsyncEngine, metadata: MetaData = launchql_metadata):
    """ Temporarily create tables, drop them when the context is quit

    Example:
        async with created_tables(engine):
            store = Store(engine)
            ...
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    try:
        yield
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.drop_all)


async def insert(engine: AsyncEngine, table: sa.Table, *values: dict):
    """ Helper: insert many rows into a table using a low-level SQL statement

    Example:
        await insert(engine, users,
               dict(id=1, email='a@a.a'),
               dict(id=2, email='b@b.b'),
        )
    """
    all_keys = set(chain.from_iterable(d.keys() for d in values))
    assert values[0].keys() == set(all_keys), 'The first dict() must contain all possible keys'

    async with engine.begin() as conn:
        await conn.execute(sa.insert(table).values(values))
