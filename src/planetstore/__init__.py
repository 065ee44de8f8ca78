"""Main Module Documentation.

The top-level module is documented below, which mainly serves as a command line entry point for
managing planet records stored in a local SQLite database.
"""

from __future__ import annotations

__version__ = "1.0.0"


def formatPlanet(planet) -> str:
    """Return the one-line listing of `planet` shown by the ``list`` command."""
    nickname = planet.nickname if planet.nickname is not None else "(no nickname)"
    return f"{planet.id}: {planet.name} - {nickname}"


async def runCommand(cli_args, logger=None):
    """Run one parsed command line request against the planet database.

    Form fields are parsed before the database is touched, so malformed input never reaches
    the store.

    Args:
        cli_args (``argparse.Namespace``): parsed arguments from :func:`.getCommandLineParser`.
        logger (:class:`.Logger`, optional): logger handed to the :class:`.PlanetStore`.

    Returns:
        The saved :class:`.Planet` for ``add``, the list of planets for ``list``, and ``None``
        for ``update`` and ``delete``.

    Raises:
        InputError: if a numeric form field is malformed.
        StorageError: if the database cannot be opened, read, or written.
    """
    # Local Imports
    from .data import Planet, PlanetStore, createDatabasePath

    planet = None
    if cli_args.command in ("add", "update"):
        planet = Planet.fromText(
            cli_args.name,
            cli_args.distance_from_sun,
            cli_args.size,
            nickname=cli_args.nickname,
            description=cli_args.description,
        )
        if cli_args.command == "update":
            planet.id = cli_args.planet_id

    async with PlanetStore(db_path=createDatabasePath(cli_args.db_path), logger=logger) as store:
        if cli_args.command == "add":
            return await store.insert(planet)

        if cli_args.command == "list":
            return await store.list()

        if cli_args.command == "update":
            await store.update(planet)

        elif cli_args.command == "delete":
            await store.delete(cli_args.planet_id)

    return None


def main(argv=None) -> None:
    """Planetstore main entry point.

    This is the function that the :command:`planetstore` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Standard Library Imports
    import asyncio

    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.cli import getCommandLineParser
    from .common.exceptions import InputError, StorageError
    from .common.logger import Logger

    parser = getCommandLineParser()
    cli_args = parser.parse_args(argv)

    if cli_args.config_path:
        BehavioralConfig(config_file_path=cli_args.config_path)

    logger = Logger("planetstore")
    try:
        result = asyncio.run(runCommand(cli_args, logger=logger))
    except (InputError, StorageError) as err:
        logger.error(f"{cli_args.command} failed: {err}")
        raise SystemExit(1) from err

    if cli_args.command == "add":
        print(f"Saved planet {result.id}")  # noqa: T201

    elif cli_args.command == "list":
        for planet in result:
            print(formatPlanet(planet))  # noqa: T201
