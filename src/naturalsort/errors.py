from __future__ import annotations


class NaturalSortError(Exception):
    """Base class for failures caused by the caller's input."""


class InputError(NaturalSortError, ValueError):
    pass


class DigitRunError(RuntimeError):
    """A digit run has no numeric value; a classification bug, never bad input."""
