from __future__ import annotations

# Third Party Imports
import pytest

# Planetstore Imports
from planetstore.data.planet import Planet

# Local Imports
from .. import EXAMPLE_EARTH, EXAMPLE_JUPITER, EXAMPLE_MARS


@pytest.fixture(name="earth")
def getEarth() -> Planet:
    """Create a valid, unsaved :class:`.Planet` object."""
    return Planet(**EXAMPLE_EARTH)


@pytest.fixture(name="planets")
def getPlanets() -> list[Planet]:
    """Create several valid, unsaved :class:`.Planet` objects."""
    return [Planet(**example) for example in (EXAMPLE_EARTH, EXAMPLE_MARS, EXAMPLE_JUPITER)]
