"""Exception types raised by brepkernel."""

from __future__ import annotations


class BrepError(Exception):
    """Base class for all brepkernel errors."""


class UnsupportedConfiguration(BrepError):
    """A geometric combination has no approximation algorithm.

    Raised instead of producing a silently wrong result.  This is a
    recoverable condition: the caller may skip the offending object or
    report it.
    """

    def __init__(self, message: str, *, surface_path=None, global_path=None):
        super().__init__(message)
        self.surface_path = surface_path
        self.global_path = global_path


class InvalidTolerance(BrepError, ValueError):
    """A tolerance was zero, negative or not a finite number."""


class UnregisteredHandleError(BrepError, KeyError):
    """Geometry was requested for a handle that was never registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else 'unregistered handle'


class GeometryRedefinitionError(BrepError, ValueError):
    """Geometry for a handle was registered twice with different values."""


class ValidationFailed(BrepError):
    """Raised by ``validate_and_return_first_error`` when violations exist."""

    def __init__(self, errors):
        self.errors = list(errors)
        first = self.errors[0] if self.errors else None
        super().__init__(str(first) if first is not None else 'validation failed')

    @property
    def first(self):
        return self.errors[0]


__all__ = [
    'BrepError',
    'UnsupportedConfiguration',
    'InvalidTolerance',
    'UnregisteredHandleError',
    'GeometryRedefinitionError',
    'ValidationFailed',
]
