"""The tropism_tree package generates steered fractal tree scenes.

This package offers:
  - Recursive branch growth with per-level decay and random variation.
  - Steering towards attract points and away from repel points.
  - A CSG scene graph of cylinders, spheres, colors and transforms.

Submodules:
  - branch: Branch sizing and segment drawing.
  - config: Logging and random-source configuration.
  - fractal_tree: FractalTree growth driver.
  - palettes: Named color palettes.
  - points: Attract/repel point markers.
  - scene: Scene-graph node types.
  - steering: Nearest-point steering vectors.
  - tree_parameters: Parameter container for tree generation.

Classes:
  FractalTree, GrowthState, TreeParameters
"""

from .config import (
    config,
    configure,
    use,
    seed,
    rng,
    spawn_rng,
    cdist,
    set_log_level,
)

from tropism_tree.branch import branch_diameter, branch_length, draw_branch
from tropism_tree.fractal_tree import FractalTree, GrowthState, generate_tree
from tropism_tree.palettes import PALETTES, color_for_level, select_palette
from tropism_tree.points import show_points
from tropism_tree.scene import (
    Color,
    Cylinder,
    Rotate,
    Sphere,
    Translate,
    Union,
    count_primitives,
    walk,
)
from tropism_tree.steering import closest_point, influence_vector, normalize
from tropism_tree.tree_parameters import TreeParameters

__all__ = [
    # Core classes
    "FractalTree",
    "GrowthState",
    "TreeParameters",
    "generate_tree",
    # Geometry
    "branch_diameter",
    "branch_length",
    "draw_branch",
    "closest_point",
    "influence_vector",
    "normalize",
    "show_points",
    # Palettes
    "PALETTES",
    "color_for_level",
    "select_palette",
    # Scene graph
    "Color",
    "Cylinder",
    "Rotate",
    "Sphere",
    "Translate",
    "Union",
    "count_primitives",
    "walk",
    # Configuration
    "config",
    "configure",
    "use",
    "seed",
    "rng",
    "spawn_rng",
    "cdist",
    "set_log_level",
]
