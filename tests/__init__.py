"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Any


DB_FILENAME = "planets_database.db"
"""``str``: file name used for per-test databases."""

EXAMPLE_EARTH: dict[str, Any] = {
    "name": "Earth",
    "distanceFromSun": 1.0,
    "size": 12742.0,
    "nickname": "Blue Marble",
    "description": "Home",
}

EXAMPLE_MARS: dict[str, Any] = {
    "name": "Mars",
    "distanceFromSun": 1.524,
    "size": 6779.0,
    "nickname": None,
    "description": "",
}

EXAMPLE_JUPITER: dict[str, Any] = {
    "name": "Jupiter",
    "distanceFromSun": 5.2,
    "size": 139820.0,
    "nickname": "Gas Giant",
    "description": "Largest planet",
}
