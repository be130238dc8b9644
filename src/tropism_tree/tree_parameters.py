"""Module defining the TreeParameters class for configuring tree growth.

This module provides the TreeParameters dataclass, which holds all settings
for generating a steered fractal tree scene.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

Point3 = Tuple[float, float, float]


def _as_points(points: Sequence[Sequence[float]], name: str) -> List[Point3]:
    """Coerce a sequence of 3D points into a list of float 3-tuples."""
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(
            f"{name} must be a sequence of (x, y, z) points; got shape {arr.shape}"
        )
    return [(float(x), float(y), float(z)) for x, y, z in arr]


@dataclass
class TreeParameters:
    """Holds settings for generating a steered fractal tree.

    Attributes:
        depth (int): Number of levels still to grow. 0 emits nothing.
        r (float): Legacy base radius. Decremented each level, not used in geometry.
        cur_x (float): Initial x position/orientation accumulator.
        cur_y (float): Initial y position/orientation accumulator.
        n_branches (int): Fan-out count at every node.
        branch_len (float): Length of the trunk segment.
        branch_d (float): Diameter at the trunk base.
        ang (float): Initial branch angle, in degrees.
        ang_dec (float): Angle decrement applied per level when `ang_rand_var` is unset.
        ang_rand_var (Optional[float]): If set, child angles are drawn uniformly from
            ``[ang - ang_rand_var, ang + ang_rand_var]`` instead of decremented.
        branch_xoffset (float): Magnitude of the per-branch x angular offset.
        branch_yoffset (float): Magnitude of the per-branch y angular offset.
        fixed_xoffset (bool): Use `branch_xoffset` as is instead of a random draw.
        fixed_yoffset (bool): Use `branch_yoffset` as is instead of a random draw.
        max_branch_variation (Optional[int]): If set, each node adds a random integer
            in ``[0, max_branch_variation]`` to `n_branches`.
        branch_d_factor (float): Per-level diameter decay, in (0, 1].
        branch_len_factor (float): Per-level length decay, in (0, 1].
        color_palette (int): Palette index; unknown values select the default palette.
        attract_points (List[Point3]): Points branches bend towards.
        repel_points (List[Point3]): Points branches bend away from.
        spatial_limit (float): Growth stops where max(|cur_x|, |cur_y|) exceeds this.
        fn (int): Tessellation resolution handed to every cylinder and sphere.
        seed (Optional[int]): Seed for a dedicated generator; None uses
            the global config.

    Notes:
        - `ang_rand_var` and `ang_dec` are mutually exclusive per node; the variance
          wins whenever it is set.
        - The default `spatial_limit` is infinite, which disables the bound guard.
    """

    depth: int = 4
    r: float = 10.0
    cur_x: float = 0.0
    cur_y: float = 0.0
    n_branches: int = 3
    branch_len: float = 30.0
    branch_d: float = 6.0
    ang: float = 30.0
    ang_dec: float = 4.0
    ang_rand_var: Optional[float] = None
    branch_xoffset: float = 10.0
    branch_yoffset: float = 10.0
    fixed_xoffset: bool = False
    fixed_yoffset: bool = False
    max_branch_variation: Optional[int] = None
    branch_d_factor: float = 0.86
    branch_len_factor: float = 0.95
    color_palette: int = 0
    attract_points: List[Point3] = field(default_factory=list)
    repel_points: List[Point3] = field(default_factory=list)
    spatial_limit: float = math.inf
    fn: int = 16
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("branch_d_factor", "branch_len_factor"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ValueError(f"{name} must be in (0, 1]; got {value}")
        if self.n_branches < 0:
            raise ValueError(f"n_branches must be >= 0; got {self.n_branches}")
        if self.max_branch_variation is not None and self.max_branch_variation < 0:
            raise ValueError(
                f"max_branch_variation must be >= 0; got {self.max_branch_variation}"
            )
        if self.ang_rand_var is not None and self.ang_rand_var < 0:
            raise ValueError(f"ang_rand_var must be >= 0; got {self.ang_rand_var}")
        if self.fn < 3:
            raise ValueError(f"fn must be >= 3; got {self.fn}")
        self.attract_points = _as_points(self.attract_points, "attract_points")
        self.repel_points = _as_points(self.repel_points, "repel_points")
