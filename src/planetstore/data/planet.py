"""Defines the :class:`.Planet` data table class."""

from __future__ import annotations

# Standard Library Imports
from math import isfinite

# Third Party Imports
from sqlalchemy import Column, Float, Integer, String

# Local Imports
from ..common.exceptions import InputError
from ..common.logger import planetstoreLogError
from .table_base import Base, _DataMixin


def _parseReal(label: str, text: str) -> float:
    """Convert human-entered `text` into a finite ``float``.

    Raises:
        InputError: if `text` is not a finite decimal number.
    """
    try:
        value = float(text.strip())
    except (AttributeError, ValueError) as err:
        msg = f"Invalid {label}: {text!r} is not a number"
        planetstoreLogError(msg)
        raise InputError(msg) from err

    if not isfinite(value):
        msg = f"Invalid {label}: {text!r} is not a finite number"
        planetstoreLogError(msg)
        raise InputError(msg)

    return value


class Planet(Base, _DataMixin):
    """Planet record table."""

    __tablename__ = "planets"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    """``int``: identifier assigned by the store on first insertion, ``None`` until then."""

    name = Column(String)
    """``str``: name of the planet."""

    distanceFromSun = Column(Float)  # noqa: N815
    """``float``: distance from the sun, in astronomical units."""

    size = Column(Float)
    """``float``: size of the planet, in kilometers."""

    nickname = Column(String, nullable=True)
    """``str``: optional nickname, ``None`` when the planet has none."""

    description = Column(String)
    """``str``: free-form description, may be empty."""

    MUTABLE_COLUMN_NAMES = (
        "name",
        "distanceFromSun",
        "size",
        "nickname",
        "description",
    )

    @classmethod
    def fromText(
        cls,
        name: str,
        distance_from_sun: str,
        size: str,
        nickname: str | None = None,
        description: str = "",
    ) -> Planet:
        """Build an unsaved :class:`.Planet` from raw form text.

        Args:
            name (``str``): planet name, kept as given.
            distance_from_sun (``str``): distance from the sun in AU, as text.
            size (``str``): size in kilometers, as text.
            nickname (``str``, optional): nickname; empty or ``None`` means no nickname.
            description (``str``, optional): description, kept as given. Defaults to ``""``.

        Returns:
            :class:`.Planet`: new planet with ``id`` unset.

        Raises:
            InputError: if either numeric field is not a finite number.
        """
        return cls(
            name=name,
            distanceFromSun=_parseReal("distance from sun", distance_from_sun),
            size=_parseReal("size", size),
            nickname=nickname or None,
            description=description,
        )

    def makeRow(self) -> dict:
        """Return the full row mapping of this planet, keyed by column name, ``id`` included."""
        return {"id": self.id, **self.makeDictionary()}
