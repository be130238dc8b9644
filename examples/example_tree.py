"""Grow a steered tree with attract/repel markers and write it as OpenSCAD."""

import logging

from tropism_tree import FractalTree, TreeParameters, Union, show_points
from utils.scad_writer import ScadWriter

logging.basicConfig(level=logging.INFO)

attract = [(60.0, 0.0, 120.0), (-40.0, 30.0, 90.0)]
repel = [(0.0, -40.0, 60.0)]

params = TreeParameters(
    depth=5,
    n_branches=3,
    branch_len=30.0,
    branch_d=6.0,
    ang=30.0,
    ang_dec=4.0,
    ang_rand_var=6.0,
    branch_xoffset=10.0,
    branch_yoffset=10.0,
    max_branch_variation=1,
    color_palette=1,
    attract_points=attract,
    repel_points=repel,
    seed=7,
)

tree = FractalTree(params)
scene = Union()
scene.add(tree.grow_tree())
scene.add(show_points(attract, repel, size=3.0))

ScadWriter.write_scad(scene, "tree.scad")
print(f"segments={tree.n_segments} end_nodes={len(tree.end_states)}")
