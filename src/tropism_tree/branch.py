"""Module defining branch sizing and drawing for tree growth.

Branch length and diameter decay exponentially with level. Each drawn
branch segment is a tapered cylinder capped by a sphere at its tip, both
tagged with one color.
"""

from __future__ import annotations

import logging

from .scene import Color, Cylinder, Group, Sphere, Translate

_LOGGER = logging.getLogger(__name__)


def branch_diameter(d: float, level: int, factor: float = 0.86) -> float:
    """Return ``d * factor**level``."""
    return d * factor**level


def branch_length(length: float, level: int, factor: float = 0.95) -> float:
    """Return ``length * factor**level``."""
    return length * factor**level


def draw_branch(
    parent: Group,
    length: float,
    diameter_base: float,
    diameter_top: float,
    color_name: str,
    fn: int = 16,
) -> Color:
    """Emit one branch segment into `parent`.

    The segment runs from the local origin along +z. The cap sphere sits at
    the tip with a radius of half the top diameter.

    Args:
        parent: Group receiving the segment.
        length: Segment length.
        diameter_base: Diameter at the base (the parent's diameter).
        diameter_top: Diameter at the tip.
        color_name: Color tag for both primitives.
        fn: Tessellation resolution.

    Returns:
        The `Color` group holding the segment.
    """
    segment = Color(name=color_name)
    segment.add(Cylinder(h=length, d1=diameter_base, d2=diameter_top, fn=fn))
    tip = Translate(vector=(0.0, 0.0, length))
    tip.add(Sphere(r=diameter_top / 2.0, fn=fn))
    segment.add(tip)
    parent.add(segment)
    _LOGGER.debug(
        "draw_branch: len=%.4g d=%.4g->%.4g color=%s",
        length,
        diameter_base,
        diameter_top,
        color_name,
    )
    return segment
