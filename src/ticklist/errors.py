# src/ticklist/errors.py

"""
Error taxonomy.

Validation / not-found / range errors are *returned* by TaskListStore inside
an OpResult so the presentation layer can show feedback. PersistenceError is
raised by byte stores and stops at the store boundary (logged, never
propagated from a store operation).
"""

from __future__ import annotations


class TicklistError(Exception):
    """Base class for all ticklist errors."""


class ValidationError(TicklistError):
    """Rejected input, e.g. an empty or whitespace-only title."""


class NotFoundError(TicklistError):
    """No task with the requested id."""


class RangeError(TicklistError):
    """A list position is outside the current bounds."""


class PersistenceError(TicklistError):
    """The underlying byte store failed to read or write."""
