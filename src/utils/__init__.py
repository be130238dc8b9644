"""The utils package contains scene writers used by tropism_tree.

Submodules:
  - scad_writer: ScadWriter for rendering scene graphs as OpenSCAD source.

Utilities:
  ScadWriter
"""

from utils.scad_writer import ScadWriter

__all__ = [
    "ScadWriter",
]
