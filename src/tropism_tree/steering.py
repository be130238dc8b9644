"""Steering vectors biasing growth towards attractors and away from repellers.

The influence at a position combines a unit vector towards the nearest
attract point with a unit vector away from the nearest repel point. Either
contribution is zero when its point list is empty.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from .config import cdist

_LOGGER = logging.getLogger(__name__)
_EPS = 1e-12

PointLike = Union[NDArray[Any], Sequence[float]]


def normalize(v: PointLike) -> NDArray[np.float64]:
    """Return `v` scaled to unit length, or the zero vector if `v` has ~0 norm."""
    arr = np.asarray(v, dtype=float)
    nrm = float(np.linalg.norm(arr))
    if nrm < _EPS or not np.isfinite(nrm):
        return np.zeros_like(arr)
    return arr / nrm


def closest_point(
    pos: PointLike, points: Sequence[PointLike]
) -> Optional[NDArray[np.float64]]:
    """Find the point in `points` nearest to `pos`.

    Ties are broken by list order (the first nearest point wins).

    Args:
        pos: Query coordinates (x, y, z).
        points: Candidate points.

    Returns:
        The closest point as a float array, or None if `points` is empty.
    """
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return None
    arr = arr.reshape(-1, 3)
    q = np.asarray(pos, dtype=float).reshape(1, 3)
    d = cdist(q, arr)[0]
    idx = int(np.argmin(d))
    _LOGGER.debug("closest_point(%s) -> idx=%d dist=%g", q[0].tolist(), idx, d[idx])
    return arr[idx]


def influence_vector(
    pos: PointLike,
    attract_points: Sequence[PointLike],
    repel_points: Sequence[PointLike],
) -> NDArray[np.float64]:
    """Compute the unit steering direction at `pos`.

    Args:
        pos: Query coordinates (x, y, z).
        attract_points: Points to grow towards.
        repel_points: Points to grow away from.

    Returns:
        A unit 3-vector, or the zero vector when no point contributes or the
        contributions cancel exactly.
    """
    p = np.asarray(pos, dtype=float).reshape(3)
    total = np.zeros(3, dtype=float)

    attract = closest_point(p, attract_points)
    if attract is not None:
        total += normalize(attract - p)

    repel = closest_point(p, repel_points)
    if repel is not None:
        total += normalize(-(repel - p))

    steer = normalize(total)
    _LOGGER.debug("influence_vector(%s) -> %s", p.tolist(), steer.tolist())
    return steer
