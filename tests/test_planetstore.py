from __future__ import annotations

# Standard Library Imports
import asyncio
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# Planetstore Imports
from planetstore import formatPlanet, main
from planetstore.data import SQLITE_PREFIX, Planet, PlanetStore

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from pathlib import Path

EARTH_ARGS = [
    "--name",
    "Earth",
    "--distance",
    "1.0",
    "--size",
    "12742",
    "--nickname",
    "Blue Marble",
    "--description",
    "Home",
]


def listStored(db_file: Path) -> list[Planet]:
    """Read the planets saved in `db_file` directly through a store."""

    async def _list():
        async with PlanetStore(db_path=f"{SQLITE_PREFIX}{db_file}") as store:
            return await store.list()

    return asyncio.run(_list())


def testFormatPlanet():
    """The listing falls back to a placeholder only when the nickname is absent."""
    assert formatPlanet(Planet(id=1, name="Earth", nickname="Blue Marble")) == "1: Earth - Blue Marble"
    assert formatPlanet(Planet(id=2, name="Mars")) == "2: Mars - (no nickname)"


def testAddAndList(db_file: Path, capsys: pytest.CaptureFixture):
    """Adding through the command line saves a planet that ``list`` prints."""
    main(["add", "-d", str(db_file), *EARTH_ARGS])
    assert "Saved planet 1" in capsys.readouterr().out

    main(["list", "-d", str(db_file)])
    assert "1: Earth - Blue Marble" in capsys.readouterr().out.splitlines()


def testDefaultDatabase(tmp_path: Path):
    """Without ``--db-path`` the application-local database is used."""
    main(["add", *EARTH_ARGS])
    stored = listStored(tmp_path / "db" / "planets_database.db")
    assert [planet.name for planet in stored] == ["Earth"]


def testUpdateAndDelete(db_file: Path):
    """``update`` replaces every field and ``delete`` removes the record."""
    main(["add", "-d", str(db_file), *EARTH_ARGS])
    main(["update", "1", "-d", str(db_file), "--name", "Terra", "--distance", "1", "--size", "12742"])

    stored = listStored(db_file)
    assert len(stored) == 1
    assert stored[0].name == "Terra"
    assert stored[0].nickname is None
    assert stored[0].description == ""

    main(["delete", "1", "-d", str(db_file)])
    assert listStored(db_file) == []


def testBadNumberLeavesStoreUnchanged(db_file: Path):
    """Malformed numbers are rejected before anything is written."""
    main(["add", "-d", str(db_file), *EARTH_ARGS])

    with pytest.raises(SystemExit) as exc_info:
        main(["update", "1", "-d", str(db_file), "--name", "Terra", "--distance", "far", "--size", "1"])
    assert exc_info.value.code == 1

    stored = listStored(db_file)
    assert [planet.name for planet in stored] == ["Earth"]


def testStorageFailureExits(tmp_path: Path):
    """A database that cannot be read makes the command fail."""
    bad_file = tmp_path / "broken.db"
    bad_file.write_bytes(b"not a database" * 200)

    with pytest.raises(SystemExit) as exc_info:
        main(["list", "-d", str(bad_file)])
    assert exc_info.value.code == 1


def testConfigFile(tmp_path: Path):
    """A config file given on the command line picks the default database."""
    config_path = tmp_path / "planets.config"
    config_path.write_text("[database]\nDatabaseDirectory = store\nDatabaseName = mine.db\n", encoding="utf-8")

    main(["-c", str(config_path), "add", *EARTH_ARGS])
    assert len(listStored(tmp_path / "store" / "mine.db")) == 1
