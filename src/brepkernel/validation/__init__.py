"""Validation of topological objects.

:func:`validate` walks an already-built object and returns every violation
it finds.  Nothing is corrected; validation only observes.

Checks:

- cycles: half-edges span distinct parameters, adjacent half-edges are
  connected, and the cycle closes
- faces: the exterior has a boundary, every cycle passes the cycle checks,
  and interior cycles wind opposite to the exterior
- sketches, shells, solids: every face passes the face checks
"""

from __future__ import annotations

import logging
from typing import List, Optional

from brepkernel.config import ValidationConfig
from brepkernel.errors import ValidationFailed
from brepkernel.geometry import Geometry
from brepkernel.storage import Handle
from brepkernel.topology import Cycle, Face, Shell, Sketch, Solid
from brepkernel.validation.checks import (
    check_cycle_closed,
    check_face_boundary,
    check_half_edge_boundaries,
    check_half_edge_connections,
    check_interior_winding,
)
from brepkernel.validation.errors import (
    AdjacentHalfEdgesNotConnected,
    CycleNotClosed,
    FaceHasNoBoundary,
    HalfEdgeBoundaryIsDegenerate,
    InvalidInteriorWinding,
    ValidationError,
)

logger = logging.getLogger(__name__)


def validate(obj, geometry: Geometry,
             config: Optional[ValidationConfig] = None) -> List[ValidationError]:
    """Return all violations found in ``obj``.

    ``obj`` is a cycle, face, sketch, shell or solid, or a handle to one.
    """
    if config is None:
        config = ValidationConfig()
    errors: List[ValidationError] = []
    _validate(obj, geometry, config, errors)
    logger.debug('validated %r: %d violation(s)', obj, len(errors))
    return errors


def validate_and_return_first_error(obj, geometry: Geometry,
                                    config: Optional[ValidationConfig] = None) -> None:
    """Raise :class:`ValidationFailed` if ``obj`` has any violation."""
    errors = validate(obj, geometry, config)
    if errors:
        raise ValidationFailed(errors)


def _validate(obj, geometry: Geometry, config: ValidationConfig,
              errors: List[ValidationError]) -> None:
    value = obj.get() if isinstance(obj, Handle) else obj

    if isinstance(value, Cycle):
        _validate_cycle(obj, geometry, config, errors)
    elif isinstance(value, Face):
        check_face_boundary(obj, errors)
        for cycle in value.all_cycles():
            _validate_cycle(cycle, geometry, config, errors)
        check_interior_winding(obj, geometry, errors)
    elif isinstance(value, (Sketch, Shell)):
        for face in value.faces:
            _validate(face, geometry, config, errors)
    elif isinstance(value, Solid):
        for shell in value.shells:
            _validate(shell, geometry, config, errors)
    else:
        raise TypeError(f'cannot validate {type(value).__name__}')


def _validate_cycle(cycle, geometry: Geometry, config: ValidationConfig,
                    errors: List[ValidationError]) -> None:
    check_half_edge_boundaries(cycle, geometry, config, errors)
    check_half_edge_connections(cycle, geometry, config, errors)
    check_cycle_closed(cycle, geometry, config, errors)


__all__ = [
    'validate',
    'validate_and_return_first_error',
    'ValidationConfig',
    'ValidationError',
    'InvalidInteriorWinding',
    'FaceHasNoBoundary',
    'CycleNotClosed',
    'AdjacentHalfEdgesNotConnected',
    'HalfEdgeBoundaryIsDegenerate',
]
