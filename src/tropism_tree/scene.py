"""Module defining the scene-graph nodes emitted by tree growth.

The scene graph is a small CSG-style hierarchy: primitives (`Cylinder`,
`Sphere`) nested inside groups that tag a color (`Color`), compose a
transform (`Translate`, `Rotate`) or just collect children (`Union`).
Writers in `utils` turn a graph into backend-specific text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Type, TypeVar, Union as TypingUnion

Vector3 = Tuple[float, float, float]
_N = TypeVar("_N", bound="Node")


@dataclass
class Cylinder:
    """Tapered cylinder along local +z, from diameter `d1` at z=0 to `d2` at z=`h`."""

    h: float
    d1: float
    d2: float
    fn: int = 16


@dataclass
class Sphere:
    """Sphere of radius `r` centred on the local origin."""

    r: float
    fn: int = 16


@dataclass
class Group:
    """Base class for nodes that own children."""

    children: List["Node"] = field(default_factory=list)

    def add(self, node: _N) -> _N:
        """Append `node` to the children and return it."""
        self.children.append(node)
        return node


@dataclass
class Union(Group):
    """Plain collection of children."""


@dataclass
class Color(Group):
    """Tags every descendant primitive with a named color."""

    name: str = "SaddleBrown"


@dataclass
class Translate(Group):
    """Offsets children by `vector`."""

    vector: Vector3 = (0.0, 0.0, 0.0)


@dataclass
class Rotate(Group):
    """Rotates children by Euler angles in degrees, applied x then y then z."""

    angles: Vector3 = (0.0, 0.0, 0.0)


Node = TypingUnion[Cylinder, Sphere, Union, Color, Translate, Rotate]


def walk(node: Node) -> Iterator[Node]:
    """Yield `node` and all of its descendants in depth-first pre-order."""
    stack: List[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, Group):
            stack.extend(reversed(current.children))


def count_primitives(node: Node, kind: Optional[Type[Node]] = None) -> int:
    """Count primitives under `node`, optionally restricted to one type."""
    kinds = (Cylinder, Sphere) if kind is None else (kind,)
    return sum(1 for n in walk(node) if isinstance(n, kinds))
