"""Defines the declarative base for data tables."""

from __future__ import annotations

# Third Party Imports
from sqlalchemy.orm import declarative_base

# Base declarative class used by SQLAlchemy to track ORM's
Base = declarative_base()


class _DataMixin:
    """Base class for objects that get stored via SQLAlchemy."""

    MUTABLE_COLUMN_NAMES = ()
    """tuple: Tuple of mutable column names."""

    def __repr__(self):
        """Define how :class:`._DataMixin` objects are represented as a ``str`` object.

        Returns:
            str: String representation of this :class:`._DataMixin` object.
        """
        rep_str = f"{self.__class__.__name__}(id={self.id}, "
        rep_str += ", ".join(f"{field}={getattr(self, field)!r}" for field in self.MUTABLE_COLUMN_NAMES)
        rep_str += ")"

        return rep_str

    def __eq__(self, other):
        """Define how :class:`._DataMixin` objects can be compared to other objects (i.e. `==`, `!=`).

        Only the :attr:`.MUTABLE_COLUMN_NAMES` take part, so a persisted row compares equal to
        the unsaved object it was built from.

        Args:
            other (object): Object to compare this :class:`._DataMixin` object to.

        Returns:
            bool: Indicates if the two objects are equal, or ``NotImplemented`` for other types.
        """
        if not isinstance(other, self.__class__):
            return NotImplemented

        return not any(
            getattr(self, attr) != getattr(other, attr) for attr in self.MUTABLE_COLUMN_NAMES
        )

    __hash__ = object.__hash__

    def makeDictionary(self) -> dict:
        """Return a dictionary representation of this :class:`._DataMixin` object.

        Returns:
            dict: Dictionary representation of this :class:`._DataMixin` object.
        """
        retval = {}
        for field in self.MUTABLE_COLUMN_NAMES:
            retval[field] = getattr(self, field)

        return retval
