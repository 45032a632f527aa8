""" Store: users and their trips, kept in a relational database """

from __future__ import annotations

import re
import logging
from collections import abc
from typing import Optional

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from launchql import exc
from launchql.settings import Settings
from launchql.typing import UserDict, TripDict

logger = logging.getLogger(__name__)


metadata = sa.MetaData()

users = sa.Table(
    'users', metadata,
    sa.Column('id', sa.Integer, primary_key=True),
    sa.Column('email', sa.String(255), nullable=False, unique=True),
    sa.Column('token', sa.String(255), nullable=True),
)

trips = sa.Table(
    'trips', metadata,
    sa.Column('id', sa.Integer, primary_key=True),
    sa.Column('launch_id', sa.Integer, nullable=False),
    sa.Column('user_id', sa.ForeignKey(users.c.id), nullable=False),
    # A user can be on a launch only once
    sa.UniqueConstraint('launch_id', 'user_id'),
)


class Store:
    """ Users & trips storage

    Every method is a coroutine: resolvers await them, and the event loop is never blocked on the database.

    Example:
        store = Store.from_settings(Settings(database_url='sqlite+aiosqlite://'))
        await store.create_tables()
        user = await store.find_or_create_user(where={'email': 'a@a.a'})
        await store.book_trips(launch_ids=[1, 2], user=user)
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> Store:
        return cls(create_async_engine(settings.database_url))

    async def create_tables(self):
        """ Create missing tables """
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def close(self):
        await self.engine.dispose()

    # ### Users

    async def find_or_create_user(self, *, where: abc.Mapping) -> Optional[UserDict]:
        """ Get a user by email. Create one if there's none

        Two requests may try to create the same user at once: the one that loses the race
        gets the user that the other one has created.

        Returns:
            The user, or `None` if the email is missing or invalid
        """
        email = where.get('email')
        if not email or not is_email(email):
            return None

        async with self.engine.connect() as conn:
            row = await self._find_user(conn, email)
        if row is not None:
            return _user_from_row(row)

        try:
            async with self.engine.begin() as conn:
                res = await conn.execute(sa.insert(users).values(email=email))
        except sa.exc.IntegrityError:
            # Created concurrently
            async with self.engine.connect() as conn:
                row = await self._find_user(conn, email)
            if row is None:
                raise
            return _user_from_row(row)

        logger.info(f'Created user {email!r}')
        return {'id': res.inserted_primary_key[0], 'email': email, 'token': None}

    async def _find_user(self, conn: AsyncConnection, email: str) -> Optional[abc.Mapping]:
        res = await conn.execute(sa.select(users).where(users.c.email == email))
        return res.mappings().first()

    # ### Trips

    async def book_trips(self, *, launch_ids: abc.Iterable[int], user: Optional[UserDict]) -> list[TripDict]:
        """ Book the user on many launches

        Returns:
            Trips that got booked. Trips that existed before are included.
        """
        _require_user(user, 'book trips')

        results = []
        for launch_id in launch_ids:
            trip = await self.book_trip(launch_id=launch_id, user=user)
            if trip is not None:
                results.append(trip)
        return results

    async def book_trip(self, *, launch_id: int, user: Optional[UserDict]) -> Optional[TripDict]:
        """ Book the user on a launch. Idempotent. """
        user = _require_user(user, 'book trips')

        async with self.engine.connect() as conn:
            row = await self._find_trip(conn, launch_id, user['id'])

        # Already booked
        if row is not None:
            return _trip_from_row(row)

        try:
            async with self.engine.begin() as conn:
                res = await conn.execute(sa.insert(trips).values(launch_id=launch_id, user_id=user['id']))
        except sa.exc.IntegrityError:
            # Booked concurrently
            async with self.engine.connect() as conn:
                row = await self._find_trip(conn, launch_id, user['id'])
            if row is None:
                raise
            return _trip_from_row(row)

        logger.info(f'Booked user #{user["id"]} on launch #{launch_id}')
        return {'id': res.inserted_primary_key[0], 'launchId': launch_id, 'userId': user['id']}

    async def _find_trip(self, conn: AsyncConnection, launch_id: int, user_id: int) -> Optional[abc.Mapping]:
        res = await conn.execute(
            sa.select(trips).where(trips.c.launch_id == launch_id, trips.c.user_id == user_id)
        )
        return res.mappings().first()

    async def cancel_trip(self, *, launch_id: int, user: Optional[UserDict]) -> bool:
        """ Cancel the user's trip on a launch

        Returns:
            Whether there was a trip to cancel
        """
        user = _require_user(user, 'cancel trips')

        async with self.engine.begin() as conn:
            res = await conn.execute(
                sa.delete(trips).where(trips.c.launch_id == launch_id, trips.c.user_id == user['id'])
            )

        cancelled = res.rowcount > 0
        if cancelled:
            logger.info(f'Cancelled the trip of user #{user["id"]} on launch #{launch_id}')
        return cancelled

    async def get_launch_ids_by_user(self, *, user: Optional[UserDict]) -> list[int]:
        """ Get ids of launches the user is booked on """
        if not user:
            return []

        async with self.engine.connect() as conn:
            res = await conn.execute(
                sa.select(trips.c.launch_id).where(trips.c.user_id == user['id']).order_by(trips.c.id)
            )
        return list(res.scalars())

    async def is_booked_on_launch(self, *, launch_id: int, user: Optional[UserDict]) -> bool:
        """ Check whether the user is booked on a launch """
        if not user:
            return False

        async with self.engine.connect() as conn:
            row = await self._find_trip(conn, launch_id, user['id'])
        return row is not None


def is_email(value: str) -> bool:
    """ Check that the value looks like an email. Not a strict check """
    return EMAIL_RE.fullmatch(value) is not None


EMAIL_RE = re.compile(r'[^@\s]+@[^@\s]+')


def _require_user(user: Optional[UserDict], operation: str) -> UserDict:
    """ Make sure that a user is given

    Raises:
        exc.NotAuthenticatedError
    """
    if not user:
        raise exc.NotAuthenticatedError(operation)
    return user


def _user_from_row(row: abc.Mapping) -> UserDict:
    return {'id': row['id'], 'email': row['email'], 'token': row['token']}


def _trip_from_row(row: abc.Mapping) -> TripDict:
    return {'id': row['id'], 'launchId': row['launch_id'], 'userId': row['user_id']}
