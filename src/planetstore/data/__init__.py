"""Defines the database models and classes for persistent planet storage."""

from __future__ import annotations

# Standard Library Imports
from os import getcwd, makedirs
from os.path import abspath, dirname, exists, join, normpath

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.logger import planetstoreLogInfo
from .planet import Planet
from .planet_store import PlanetStore

__all__ = [
    "Planet",
    "PlanetStore",
    "SQLITE_PREFIX",
    "createDatabasePath",
]

SQLITE_PREFIX = "sqlite+aiosqlite:///"
"""``str``: SQLAlchemy URL prefix for the async SQLite driver."""


def createDatabasePath(path=None):
    """Create a valid URL for the planet database.

    Args:
        path (``str``, optional): path-like string to the desired database file location.
            Defaults to ``None``, which uses the configured application-local file.

    Returns:
        ``str``: properly formatted database URL.
    """
    if not path:
        config = BehavioralConfig.getConfig().database
        path = join(getcwd(), config.DatabaseDirectory, config.DatabaseName)

    directory = abspath(dirname(path))
    if not exists(directory):
        planetstoreLogInfo(f"Creating database directory: {directory}")
        makedirs(directory)

    return f"{SQLITE_PREFIX}{normpath(abspath(path))}"
