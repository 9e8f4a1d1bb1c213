"""Exceptions raised by dat.

Errors from the underlying `datetime` and Babel calls are not wrapped and
reach the caller unchanged.
"""

from collections.abc import Iterable


class DatError(Exception):
    """Base exception for all dat errors."""


class UnknownUnitError(DatError, ValueError):
    """A duration unit outside the supported set was given.

    Raised by `calculate_duration`, `has_after`, `has_before`, `has_same` and
    `format_duration`. No fallback unit is ever substituted.
    """

    def __init__(self, unit: object, accepted: Iterable[str] = ()):
        self.unit: object = unit
        valid = ", ".join(accepted)
        message = f"Unknown unit: {unit!r}"
        if valid:
            message += f"\nValid units: {valid}"
        super().__init__(message)


__all__ = ["DatError", "UnknownUnitError"]
