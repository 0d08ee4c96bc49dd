"""Violations reported by validation.

Violations are plain data.  Validation never raises them; it returns them
so callers can decide whether one is fatal or whether to collect them all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from brepkernel.topology import Winding


@dataclass(frozen=True)
class ValidationError:
    """Base class of all violations."""

    def message(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return self.message()


@dataclass(frozen=True)
class InvalidInteriorWinding(ValidationError):
    """An interior cycle winds the same way as its face's exterior."""

    face: Any
    interior: Any
    exterior_winding: Winding
    interior_winding: Winding

    def message(self) -> str:
        return (
            'Interior of `Face` has invalid winding; must be opposite of exterior\n'
            f'- Winding of exterior cycle: {self.exterior_winding.name}\n'
            f'- Winding of interior cycle: {self.interior_winding.name}\n'
            f'- `Face`: {self.face!r}'
        )


@dataclass(frozen=True)
class FaceHasNoBoundary(ValidationError):
    """A face's exterior cycle has no half-edges."""

    face: Any

    def message(self) -> str:
        return f'`Face` has no boundary: {self.face!r}'


@dataclass(frozen=True)
class CycleNotClosed(ValidationError):
    """The last half-edge of a cycle does not end where the first starts."""

    cycle: Any
    first: Any
    last: Any
    end_of_last: Tuple[float, ...]
    start_of_first: Tuple[float, ...]
    distance: float

    def message(self) -> str:
        return (
            '`Cycle` is not closed\n'
            f'- End of last half-edge: {self.end_of_last}\n'
            f'- Start of first half-edge: {self.start_of_first}\n'
            f'- Distance between them: {self.distance}\n'
            f'- `Cycle`: {self.cycle!r}'
        )


@dataclass(frozen=True)
class AdjacentHalfEdgesNotConnected(ValidationError):
    """Two consecutive half-edges of a cycle leave a gap between them."""

    cycle: Any
    first: Any
    second: Any
    end_of_first: Tuple[float, ...]
    start_of_second: Tuple[float, ...]
    distance: float
    index: Optional[int] = None

    def message(self) -> str:
        return (
            'Adjacent `HalfEdge`s are not connected\n'
            f'- End of first: {self.end_of_first}\n'
            f'- Start of second: {self.start_of_second}\n'
            f'- Distance between them: {self.distance}\n'
            f'- Position in cycle: {self.index}\n'
            f'- `Cycle`: {self.cycle!r}'
        )


@dataclass(frozen=True)
class HalfEdgeBoundaryIsDegenerate(ValidationError):
    """A half-edge starts and ends at the same curve parameter."""

    cycle: Any
    half_edge: Any
    boundary: Any
    length: float

    def message(self) -> str:
        return (
            'Boundary of `HalfEdge` is degenerate\n'
            f'- Boundary: {self.boundary!r}\n'
            f'- Length: {self.length}\n'
            f'- `HalfEdge`: {self.half_edge!r}'
        )


__all__ = [
    'ValidationError',
    'InvalidInteriorWinding',
    'FaceHasNoBoundary',
    'CycleNotClosed',
    'AdjacentHalfEdgesNotConnected',
    'HalfEdgeBoundaryIsDegenerate',
]
