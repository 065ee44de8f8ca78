"""Contains all the custom-defined exceptions used in planetstore."""

from __future__ import annotations


class PlanetStoreError(Exception):
    """Base exception for errors raised by planetstore."""


class StorageError(PlanetStoreError):
    """The planet database could not be opened, read, or written."""


class InputError(PlanetStoreError, ValueError):
    """Human-supplied text could not be turned into a valid :class:`.Planet`."""
