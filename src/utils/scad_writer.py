"""Module defining ScadWriter for exporting scene graphs to OpenSCAD source.

This module provides ScadWriter, a utility class with static methods to
render a tropism_tree scene graph as OpenSCAD text and write it to disk.
"""

from __future__ import annotations

import logging
from typing import List

from tropism_tree.scene import (
    Color,
    Cylinder,
    Group,
    Node,
    Rotate,
    Sphere,
    Translate,
    Union,
)

_LOGGER = logging.getLogger(__name__)
_INDENT = "  "


def _num(x: float) -> str:
    """Format a number compactly for OpenSCAD."""
    return f"{float(x):.6g}"


def _vec(v) -> str:
    return "[" + ", ".join(_num(c) for c in v) + "]"


class ScadWriter:
    """Utility class for writing scene graphs as OpenSCAD source."""

    @staticmethod
    def _header(node: Group) -> str:
        if isinstance(node, Color):
            return f'color("{node.name}")'
        if isinstance(node, Translate):
            return f"translate({_vec(node.vector)})"
        if isinstance(node, Rotate):
            return f"rotate({_vec(node.angles)})"
        if isinstance(node, Union):
            return "union()"
        raise ValueError(f"Unsupported group node: {type(node).__name__}")

    @staticmethod
    def _emit(node: Node, depth: int, out: List[str]) -> None:
        pad = _INDENT * depth
        if isinstance(node, Cylinder):
            out.append(
                f"{pad}cylinder(h={_num(node.h)}, d1={_num(node.d1)}, "
                f"d2={_num(node.d2)}, $fn={int(node.fn)});"
            )
        elif isinstance(node, Sphere):
            out.append(f"{pad}sphere(r={_num(node.r)}, $fn={int(node.fn)});")
        elif isinstance(node, Group):
            out.append(f"{pad}{ScadWriter._header(node)} {{")
            for child in node.children:
                ScadWriter._emit(child, depth + 1, out)
            out.append(f"{pad}}}")
        else:
            raise ValueError(f"Unsupported scene node: {type(node).__name__}")

    @staticmethod
    def render(scene: Node) -> str:
        """Render `scene` as OpenSCAD source text.

        Args:
            scene: Root node of the scene graph.

        Returns:
            str: OpenSCAD source, one statement per line.

        Raises:
            ValueError: If the graph contains an unknown node type.
        """
        out: List[str] = []
        ScadWriter._emit(scene, 0, out)
        return "\n".join(out) + "\n"

    @staticmethod
    def write_scad(scene: Node, filename: str) -> None:
        """Write `scene` to an OpenSCAD file.

        Args:
            scene: Root node of the scene graph.
            filename: Path to the output .scad file.

        Returns:
            None: The file is written to disk.
        """
        text = ScadWriter.render(scene)
        try:
            with open(filename, "w", encoding="utf-8") as fh:
                fh.write(text)
        except OSError:
            _LOGGER.exception("write_scad: failed to write '%s'.", filename)
            raise
        _LOGGER.info("write_scad: wrote '%s' (%d lines).", filename, text.count("\n"))
