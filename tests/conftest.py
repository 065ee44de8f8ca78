from __future__ import annotations

# Standard Library Imports
import asyncio
import logging
import sys
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# Planetstore Imports
from planetstore.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from planetstore.data import SQLITE_PREFIX, PlanetStore

# Local Imports
from . import DB_FILENAME

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from pathlib import Path


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Automatically delete the config environment variable, if set, and work in `tmp_path`.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes
        tmp_path (:class:`pathlib.Path`): per-test temporary directory

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables or database files.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        m_patch.chdir(tmp_path)
        BehavioralConfig.resetConfig()
        yield
        # Make sure we reset the config after each test function
        BehavioralConfig.resetConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="db_file")
def getDatabaseFile(tmp_path: Path) -> Path:
    """Return the location of the per-test database file."""
    return tmp_path / DB_FILENAME


@pytest.fixture(name="store")
def getPlanetStore(db_file: Path, test_logger: logging.Logger) -> PlanetStore:
    """Create a :class:`.PlanetStore` backed by a fresh database file.

    Yields:
        :class:`.PlanetStore`: properly constructed store object
    """
    store = PlanetStore(db_path=f"{SQLITE_PREFIX}{db_file}", logger=test_logger)
    yield store
    asyncio.run(store.dispose())
