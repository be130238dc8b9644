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


def _sample():
    root = Union()
    c = root.add(Color(name="red"))
    c.add(Cylinder(h=1.0, d1=1.0, d2=0.5))
    t = c.add(Translate(vector=(0.0, 0.0, 1.0)))
    t.add(Sphere(r=0.25))
    r = root.add(Rotate(angles=(10.0, 0.0, 0.0)))
    r.add(Cylinder(h=2.0, d1=0.5, d2=0.5))
    return root


def test_walk_is_preorder():
    kinds = [type(n).__name__ for n in walk(_sample())]
    assert kinds == [
        "Union",
        "Color",
        "Cylinder",
        "Translate",
        "Sphere",
        "Rotate",
        "Cylinder",
    ]


def test_count_primitives():
    root = _sample()
    assert count_primitives(root) == 3
    assert count_primitives(root, Cylinder) == 2
    assert count_primitives(root, Sphere) == 1
    assert count_primitives(Union()) == 0


def test_add_returns_node():
    root = Union()
    node = Sphere(r=1.0)
    assert root.add(node) is node
