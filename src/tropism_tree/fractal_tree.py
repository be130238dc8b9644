"""Module defining the FractalTree class to grow steered fractal trees.

This module implements recursive branch subdivision with per-level decay of
length and diameter, optional random fan-out and angle jitter, and a
steering vector computed from attract/repel points that bends each child.
Growth runs on an explicit LIFO work stack so the emitted scene graph is
built in depth-first pre-order without deep Python recursion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .branch import branch_diameter, branch_length, draw_branch
from .config import spawn_rng
from .palettes import color_for_level, select_palette
from .scene import Group, Rotate, Translate, Union
from .steering import influence_vector
from .tree_parameters import TreeParameters

_LOGGER = logging.getLogger(__name__)

# Steering weights on the positional offset and on the child orientation.
_OFFSET_STEER_WEIGHT = 10.0
_ANGLE_STEER_WEIGHT = 20.0


@dataclass(frozen=True)
class GrowthState:
    """Per-node growth state, derived from the parent and never shared.

    Attributes:
        depth (int): Levels still to grow, including this one.
        level (int): Levels already consumed (0 at the root).
        r (float): Legacy radius passthrough.
        cur_x (float): Accumulated x orientation/position.
        cur_y (float): Accumulated y orientation/position.
        branch_len (float): Length handed down by the parent.
        branch_d (float): Diameter handed down by the parent (this segment's base).
        ang (float): Branch angle in degrees.
    """

    depth: int
    level: int
    r: float
    cur_x: float
    cur_y: float
    branch_len: float
    branch_d: float
    ang: float


class FractalTree:
    """Steered fractal-tree generator emitting a CSG scene graph.

    Attributes:
        params (TreeParameters): Growth parameters.
        rng (np.random.Generator): Random source threaded through the whole run.
        palette (Tuple[str, ...]): Palette selected from `params.color_palette`.
        scene (Optional[Union]): Root of the grown scene, None before `grow_tree`.
        n_segments (int): Branch segments emitted by the last run.
        states (List[GrowthState]): Drawn states in emission (pre-)order.
        end_states (List[GrowthState]): Drawn states that spawned no children.
    """

    def __init__(
        self, params: TreeParameters, rng: Optional[np.random.Generator] = None
    ) -> None:
        """Initialize the generator.

        Args:
            params: Tree growth parameters.
            rng: Explicit generator. If None, one is seeded from `params.seed`
                or spawned from the global configuration.

        Raises:
            TypeError: If `params` is not a TreeParameters instance.
        """
        if not isinstance(params, TreeParameters):
            raise TypeError("The parameters must be an instance of TreeParameters")
        self.params = params

        if rng is None:
            if params.seed is not None:
                rng = np.random.Generator(np.random.PCG64(params.seed))
            else:
                rng = spawn_rng()
        self.rng = rng

        self.palette = select_palette(params.color_palette)
        self._attract = np.asarray(params.attract_points, dtype=float).reshape(-1, 3)
        self._repel = np.asarray(params.repel_points, dtype=float).reshape(-1, 3)

        # Outputs populated by grow_tree()
        self.scene: Optional[Union] = None
        self.n_segments = 0
        self.states: List[GrowthState] = []
        self.end_states: List[GrowthState] = []

    def _within_bounds(self, cur_x: float, cur_y: float) -> bool:
        """Return True if the accumulators lie inside the spatial limit."""
        return max(abs(cur_x), abs(cur_y)) <= self.params.spatial_limit

    def _branch_count(self) -> int:
        """Fan-out for one node, re-drawn per node when variation is enabled."""
        n = int(self.params.n_branches)
        variation = self.params.max_branch_variation
        if variation is None:
            return n
        return n + int(self.rng.integers(0, int(variation), endpoint=True))

    def _offset(self, magnitude: float, fixed: bool, steer: float) -> float:
        """Angular offset for one branch along one axis."""
        if fixed:
            return float(magnitude)
        jitter = float(self.rng.uniform(-magnitude, magnitude))
        return jitter + _OFFSET_STEER_WEIGHT * steer

    def _child_angle(self, ang: float) -> float:
        """Child angle: random around `ang` if variance is set, else decremented."""
        var = self.params.ang_rand_var
        if var is None:
            return ang - self.params.ang_dec
        return float(self.rng.uniform(ang - var, ang + var))

    def _draw_node(
        self, state: GrowthState, container: Group
    ) -> Tuple[Translate, float, float]:
        """Draw the segment for `state` and return the tip group plus sizes."""
        p = self.params
        length = branch_length(state.branch_len, state.level, p.branch_len_factor)
        top_d = branch_diameter(state.branch_d, state.level, p.branch_d_factor)
        color = color_for_level(self.palette, state.level)

        node = container.add(Union())
        draw_branch(node, length, state.branch_d, top_d, color, fn=p.fn)
        tip = node.add(Translate(vector=(0.0, 0.0, length)))
        return tip, length, top_d

    def _spawn_children(
        self,
        state: GrowthState,
        tip: Group,
        length: float,
        top_d: float,
    ) -> List[Tuple[GrowthState, Group]]:
        """Compute child states for every angular slot of `state`.

        Children outside the spatial limit are dropped without geometry.
        """
        p = self.params
        pos: NDArray[Any] = np.array([state.cur_x, state.cur_y, length], dtype=float)
        steer = influence_vector(pos, self._attract, self._repel)

        n = self._branch_count()
        children: List[Tuple[GrowthState, Group]] = []
        for i in range(n):
            slot = i * 360.0 / n
            x_off = self._offset(p.branch_xoffset, p.fixed_xoffset, steer[0])
            y_off = self._offset(p.branch_yoffset, p.fixed_yoffset, steer[1])
            ang = self._child_angle(state.ang)

            x_ang = float(np.sin(np.radians(slot + x_off))) * ang
            x_ang += _ANGLE_STEER_WEIGHT * float(steer[0])
            y_ang = float(np.cos(np.radians(slot + y_off))) * ang
            y_ang += _ANGLE_STEER_WEIGHT * float(steer[1])
            # Orientation angles double as the planar position accumulator.
            cur_x = state.cur_x + x_ang
            cur_y = state.cur_y + y_ang

            if not self._within_bounds(cur_x, cur_y):
                _LOGGER.debug(
                    "Level %d slot %d: (%.4g, %.4g) beyond limit %.4g; pruned.",
                    state.level,
                    i,
                    cur_x,
                    cur_y,
                    p.spatial_limit,
                )
                continue

            child = GrowthState(
                depth=state.depth - 1,
                level=state.level + 1,
                r=state.r - 1,
                cur_x=cur_x,
                cur_y=cur_y,
                branch_len=length,
                branch_d=top_d,
                ang=ang,
            )
            rot = tip.add(Rotate(angles=(float(x_ang), float(y_ang), 0.0)))
            children.append((child, rot))

        _LOGGER.debug(
            "Level %d: steer=%s fan-out=%d kept=%d",
            state.level,
            steer.tolist(),
            n,
            len(children),
        )
        return children

    def grow_tree(self) -> Union:
        """Generate the tree and return the root of its scene graph."""
        p = self.params
        _LOGGER.info(
            "Growing tree: depth=%d n_branches=%d palette=%d attract=%d repel=%d",
            p.depth,
            p.n_branches,
            p.color_palette,
            len(self._attract),
            len(self._repel),
        )

        root = Union()
        self.scene = root
        self.n_segments = 0
        self.states = []
        self.end_states = []

        init = GrowthState(
            depth=int(p.depth),
            level=0,
            r=float(p.r),
            cur_x=float(p.cur_x),
            cur_y=float(p.cur_y),
            branch_len=float(p.branch_len),
            branch_d=float(p.branch_d),
            ang=float(p.ang),
        )
        stack: List[Tuple[GrowthState, Group]] = []
        if init.depth > 0 and self._within_bounds(init.cur_x, init.cur_y):
            stack.append((init, root))
        else:
            _LOGGER.info("Root terminated immediately (depth=%d).", init.depth)

        while stack:
            state, container = stack.pop()
            tip, length, top_d = self._draw_node(state, container)
            self.n_segments += 1
            self.states.append(state)

            if state.depth - 1 <= 0:
                self.end_states.append(state)
                continue

            children = self._spawn_children(state, tip, length, top_d)
            if not children:
                self.end_states.append(state)
            # Reversed so the first slot is drawn next (pre-order).
            stack.extend(reversed(children))

        _LOGGER.info(
            "Tree complete: segments=%d end_nodes=%d",
            self.n_segments,
            len(self.end_states),
        )
        return root

    def to_scad(self) -> str:
        """Return the grown scene as OpenSCAD source."""
        from utils.scad_writer import ScadWriter

        if self.scene is None:
            raise ValueError("Cannot render: call grow_tree() first.")
        return ScadWriter.render(self.scene)

    def save(self, filename: str) -> None:
        """Write the grown scene to an OpenSCAD file."""
        from utils.scad_writer import ScadWriter

        if self.scene is None:
            _LOGGER.error("save: tree has not been grown.")
            raise ValueError("Cannot save: call grow_tree() first.")
        ScadWriter.write_scad(self.scene, filename)


def generate_tree(rng: Optional[np.random.Generator] = None, **options: Any) -> Union:
    """Build `TreeParameters` from keywords, grow the tree and return its scene."""
    return FractalTree(TreeParameters(**options), rng=rng).grow_tree()
