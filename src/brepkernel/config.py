"""Default tolerances and validation settings."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

#: Minimum distance between two vertices for them to count as distinct (0.5 um).
DISTINCT_MIN_DISTANCE = 5e-7

#: Maximum distance between two points for them to count as identical.
IDENTICAL_MAX_DISTANCE = 5e-14


@dataclass(frozen=True)
class ValidationConfig:
    """Settings that control geometric comparisons during validation."""

    distinct_min_distance: float = DISTINCT_MIN_DISTANCE
    identical_max_distance: float = IDENTICAL_MAX_DISTANCE

    def __post_init__(self) -> None:
        if self.identical_max_distance < 0 or self.distinct_min_distance < 0:
            raise ValueError('validation distances must be non-negative')
        if self.identical_max_distance > self.distinct_min_distance:
            raise ValueError(
                'identical_max_distance must not exceed distinct_min_distance')

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'ValidationConfig':
        """Build a config from a plain mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: float(v) for k, v in data.items() if k in known})


__all__ = [
    'DISTINCT_MIN_DISTANCE',
    'IDENTICAL_MAX_DISTANCE',
    'ValidationConfig',
]
