"""Defines the :class:`.PlanetStore` persistence facade."""

from __future__ import annotations

# Standard Library Imports
from contextlib import asynccontextmanager
from traceback import format_exc
from typing import TYPE_CHECKING

# Third Party Imports
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from sqlalchemy.schema import CreateTable

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import StorageError
from ..common.logger import Logger
from .planet import Planet

if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import AsyncIterator

    # Third Party Imports
    from sqlalchemy.ext.asyncio import AsyncSession


class PlanetStore:
    """Asynchronous store for :class:`.Planet` records in a single SQLite table.

    Every operation opens its own connection, runs one statement inside a transaction, and
    closes the connection again before returning or raising. Nothing is held between calls,
    so any number of callers may share one database file.
    """

    TABLE = Planet.__table__

    def __init__(self, db_path=None, logger=None, verbose_echo=None):
        """Create the async engine for the planet database.

        Args:
            db_path (``str``, optional): SQLAlchemy URL of the database, e.g.
                ``sqlite+aiosqlite:///planets_database.db``. Defaults to the configured
                application-local database file.
            logger (:class:`.Logger`, optional): Previously instantiated logging object to use.
                Defaults to ``None``, resulting in a new :class:`.Logger` instance.
            verbose_echo (``bool``, optional): Flag that if set ``True``, will tell the
                SQLAlchemy engine to output the raw SQL statements it runs. Defaults to the
                configured value.
        """
        self.logger = logger
        if self.logger is None:
            self.logger = Logger("planetstore")

        if not db_path:
            # Local Imports
            from . import createDatabasePath

            db_path = createDatabasePath()

        if verbose_echo is None:
            verbose_echo = BehavioralConfig.getConfig().database.VerboseEcho

        self.db_path = db_path
        # NullPool closes the DBAPI connection as soon as a session releases it
        self.engine = create_async_engine(db_path, echo=verbose_echo, poolclass=NullPool)
        self.session_factory = async_sessionmaker(bind=self.engine, expire_on_commit=False)
        self._schema_ready = False

        self.logger.debug(f"Database path: {db_path}")

    async def __aenter__(self) -> PlanetStore:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.dispose()

    async def _createSchema(self) -> None:
        """Create the ``planets`` table if it does not exist yet, once per store."""
        if self._schema_ready:
            return

        try:
            async with self.engine.begin() as conn:
                await conn.execute(CreateTable(self.TABLE, if_not_exists=True))
        except SQLAlchemyError as err:
            self.logger.error(
                f"Exception thrown in `PlanetStore._createSchema()` by {self}: \n{format_exc()}",
            )
            raise StorageError(f"Unable to open planet database {self.db_path!r}") from err

        self._schema_ready = True

    @asynccontextmanager
    async def _getSessionScope(self) -> AsyncIterator[AsyncSession]:
        """Provide a transactional scope around a single store operation.

        Yields:
            :class:`sqlalchemy.ext.asyncio.AsyncSession`: session bound to a fresh connection

        Raises:
            StorageError: if the database cannot be opened, read, or written.
        """
        await self._createSchema()

        current_session = self.session_factory()
        try:
            yield current_session
            await current_session.commit()
        except SQLAlchemyError as err:
            self.logger.error(
                f"Exception thrown in `PlanetStore._getSessionScope()` by {self}: \n{format_exc()}",
            )
            await current_session.rollback()
            raise StorageError(f"Planet database operation failed: {err}") from err
        finally:
            await current_session.close()

    async def insert(self, planet: Planet) -> Planet:
        """Write `planet` to the database, replacing any row with the same ``id``.

        Args:
            planet (:class:`.Planet`): planet to save. If ``id`` is unset, the store assigns
                the next identifier.

        Returns:
            :class:`.Planet`: the same `planet`, with ``id`` populated.
        """
        values = planet.makeRow()
        if values["id"] is None:
            del values["id"]

        stmt = insert(self.TABLE).prefix_with("OR REPLACE").values(**values)
        async with self._getSessionScope() as session:
            result = await session.execute(stmt)
            planet_id = result.inserted_primary_key[0]

        planet.id = planet_id
        self.logger.debug(f"Inserted planet {planet_id}")
        return planet

    async def list(self) -> list[Planet]:
        """Return every stored planet, in the database's natural row order."""
        async with self._getSessionScope() as session:
            result = await session.execute(select(Planet))
            planets = result.scalars().all()

        return planets

    async def update(self, planet: Planet) -> None:
        """Replace every field of the row whose ``id`` matches `planet`.

        Updating an ``id`` that is not stored, or a planet without an ``id``, changes nothing.

        Args:
            planet (:class:`.Planet`): planet holding the new values and the target ``id``.
        """
        stmt = (
            update(self.TABLE)
            .where(self.TABLE.c.id == planet.id)
            .values(**planet.makeDictionary())
        )
        async with self._getSessionScope() as session:
            result = await session.execute(stmt)
            count = result.rowcount

        if count == 0:
            self.logger.debug(f"No planet with id {planet.id} to update")

    async def delete(self, planet_id: int) -> None:
        """Remove the planet whose ``id`` is `planet_id`, if there is one.

        Args:
            planet_id (``int``): identifier of the planet to remove.
        """
        stmt = delete(self.TABLE).where(self.TABLE.c.id == planet_id)
        async with self._getSessionScope() as session:
            result = await session.execute(stmt)
            count = result.rowcount

        if count == 0:
            self.logger.debug(f"No planet with id {planet_id} to delete")

    async def dispose(self) -> None:
        """Release any resources held by the engine."""
        await self.engine.dispose()

    def __repr__(self):
        return f"{self.__class__.__name__}(db_path={self.db_path!r})"
