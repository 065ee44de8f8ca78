"""Define the command line interface for the planetstore tool."""

from __future__ import annotations

# Standard Library Imports
import argparse


def _addDatabaseArgument(parser):
    """Attach the shared ``--db-path`` option to `parser`."""
    parser.add_argument(
        "-d",
        "--db-path",
        dest="db_path",
        metavar="DB_PATH",
        default=None,
        type=str,
        help="Path to planet database. DEFAULT: configured application database",
    )


def _addPlanetArguments(parser):
    """Attach the planet form fields to `parser`.

    Numbers are taken as text so that :meth:`.Planet.fromText` does the parsing.
    """
    parser.add_argument("-n", "--name", dest="name", required=True, help="Planet name")
    parser.add_argument(
        "--distance",
        dest="distance_from_sun",
        metavar="AU",
        required=True,
        help="Distance from the sun in astronomical units",
    )
    parser.add_argument(
        "--size",
        dest="size",
        metavar="KM",
        required=True,
        help="Size of the planet in kilometers",
    )
    parser.add_argument(
        "--nickname",
        dest="nickname",
        default=None,
        help="Optional nickname",
    )
    parser.add_argument(
        "--description",
        dest="description",
        default="",
        help="Planet description",
    )


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="Planet record manager")
    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=str,
        help="Path to a behavior config file",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    add_parser = subparsers.add_parser("add", help="Save a new planet")
    _addPlanetArguments(add_parser)
    _addDatabaseArgument(add_parser)

    list_parser = subparsers.add_parser("list", help="Show every saved planet")
    _addDatabaseArgument(list_parser)

    update_parser = subparsers.add_parser("update", help="Replace the fields of a saved planet")
    update_parser.add_argument("planet_id", metavar="ID", type=int, help="Planet identifier")
    _addPlanetArguments(update_parser)
    _addDatabaseArgument(update_parser)

    delete_parser = subparsers.add_parser("delete", help="Remove a saved planet")
    delete_parser.add_argument("planet_id", metavar="ID", type=int, help="Planet identifier")
    _addDatabaseArgument(delete_parser)

    return parser
