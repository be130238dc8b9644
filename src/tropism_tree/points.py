"""Visual markers for attract and repel points."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .scene import Color, Sphere, Translate, Union

_LOGGER = logging.getLogger(__name__)

ATTRACT_COLOR = "green"
REPEL_COLOR = "red"


def show_points(
    attract_points: Sequence[Sequence[float]],
    repel_points: Sequence[Sequence[float]],
    size: float = 2.0,
    fn: int = 16,
) -> Union:
    """Return a scene with one sphere of radius `size` at every point.

    Attract points are green and repel points red. No tree geometry is emitted.
    """
    markers = Union()
    for points, color in ((attract_points, ATTRACT_COLOR), (repel_points, REPEL_COLOR)):
        arr = np.asarray(points, dtype=float).reshape(-1, 3)
        if arr.shape[0] == 0:
            continue
        group = markers.add(Color(name=color))
        for x, y, z in arr:
            marker = group.add(Translate(vector=(float(x), float(y), float(z))))
            marker.add(Sphere(r=float(size), fn=fn))
    _LOGGER.debug(
        "show_points: attract=%d repel=%d size=%g",
        len(attract_points),
        len(repel_points),
        size,
    )
    return markers
