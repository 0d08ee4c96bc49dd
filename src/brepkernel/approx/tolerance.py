"""Tolerance and approximation points."""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite
from typing import Tuple, Union

from brepkernel.errors import InvalidTolerance


@dataclass(frozen=True, order=True)
class Tolerance:
    """Upper bound on the distance between an approximation and the true shape."""

    value: float

    def __post_init__(self) -> None:
        try:
            value = float(self.value)
        except (TypeError, ValueError):
            raise InvalidTolerance(f'tolerance must be a number, not {self.value!r}') from None
        if not isfinite(value) or value <= 0.0:
            raise InvalidTolerance(f'tolerance must be positive and finite, not {value!r}')
        object.__setattr__(self, 'value', value)

    @classmethod
    def coerce(cls, value: Union['Tolerance', float]) -> 'Tolerance':
        if isinstance(value, Tolerance):
            return value
        return cls(value)

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True, order=True)
class ApproxPoint:
    """A point of an approximation, in local and global coordinates.

    ``local_form`` is the point in the parameter space of whatever was
    approximated (1-D for curves, 2-D for surfaces); ``global_form`` is the
    same point in 3-D model space.
    """

    local_form: Tuple[float, ...]
    global_form: Tuple[float, float, float]

    def __post_init__(self) -> None:
        local = self.local_form
        if not isinstance(local, (tuple, list)):
            local = (local,)
        object.__setattr__(self, 'local_form', tuple(float(c) for c in local))
        object.__setattr__(self, 'global_form', tuple(float(c) for c in self.global_form))

    @property
    def t(self) -> float:
        """The curve parameter of a 1-D approximation point."""
        if len(self.local_form) != 1:
            raise ValueError('point is not on a curve')
        return self.local_form[0]


__all__ = ['Tolerance', 'ApproxPoint']
