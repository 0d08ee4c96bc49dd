"""Parameter intervals on curves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True, order=True)
class CurveBoundary:
    """An ordered pair of curve parameters delimiting part of a curve.

    ``start`` and ``end`` may be in either order; a boundary whose ``end``
    is smaller than its ``start`` traverses the curve backwards.  A boundary
    and its reverse denote the same point set.
    """

    start: float
    end: float

    def __post_init__(self) -> None:
        object.__setattr__(self, 'start', float(self.start))
        object.__setattr__(self, 'end', float(self.end))

    @classmethod
    def from_pair(cls, pair: Iterable[float]) -> 'CurveBoundary':
        """Build a boundary from ``[a, b]``, accepting ``[[a], [b]]`` too."""
        a, b = (_scalar(p) for p in pair)
        return cls(a, b)

    @property
    def inner(self) -> Tuple[float, float]:
        return (self.start, self.end)

    def reverse(self) -> 'CurveBoundary':
        return CurveBoundary(self.end, self.start)

    def is_normalized(self) -> bool:
        return self.start <= self.end

    def normalize(self) -> 'CurveBoundary':
        """Return the boundary with its ends in increasing order."""
        if self.is_normalized():
            return self
        return self.reverse()

    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, t: float) -> bool:
        """``True`` if ``t`` lies strictly between the two ends."""
        low, high = self.normalize().inner
        return low < t < high

    def overlaps(self, other: 'CurveBoundary') -> bool:
        """``True`` if the boundaries overlap or touch."""
        a_low, a_high = self.normalize().inner
        b_low, b_high = other.normalize().inner
        return a_low <= b_high and a_high >= b_low

    def union(self, other: 'CurveBoundary') -> 'CurveBoundary':
        """Return the smallest normalized boundary covering both.

        The boundaries must at least touch; anything else is a caller bug.
        """
        assert self.overlaps(other), \
            "Can't merge boundaries that don't at least touch"
        a_low, a_high = self.normalize().inner
        b_low, b_high = other.normalize().inner
        return CurveBoundary(min(a_low, b_low), max(a_high, b_high))

    def subset(self, other: 'CurveBoundary') -> 'CurveBoundary':
        """Return the normalized intersection of both boundaries.

        Disjoint boundaries intersect in an empty boundary.
        """
        a_low, a_high = self.normalize().inner
        b_low, b_high = other.normalize().inner
        low = max(a_low, b_low)
        high = min(a_high, b_high)
        if low > high:
            return CurveBoundary(low, low)
        return CurveBoundary(low, high)

    def __iter__(self):
        return iter(self.inner)

    def __repr__(self) -> str:
        return f'CurveBoundary([{self.start!r}] -> [{self.end!r}])'


def _scalar(value) -> float:
    if isinstance(value, (list, tuple)):
        if len(value) != 1:
            raise ValueError('curve parameters are one-dimensional')
        return float(value[0])
    return float(value)


__all__ = ['CurveBoundary']
