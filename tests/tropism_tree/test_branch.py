import numpy as np
import pytest

from tropism_tree.branch import branch_diameter, branch_length, draw_branch
from tropism_tree.scene import Color, Cylinder, Sphere, Translate, Union


@pytest.mark.parametrize("factor", [0.5, 0.86, 1.0])
def test_diameter_decay_is_exponential_and_non_increasing(factor):
    values = [branch_diameter(6.0, level, factor) for level in range(10)]
    for level, value in enumerate(values):
        assert np.isclose(value, 6.0 * factor**level)
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_length_decay_defaults():
    assert branch_length(30.0, 0) == 30.0
    assert np.isclose(branch_length(30.0, 2), 30.0 * 0.95**2)
    assert np.isclose(branch_diameter(6.0, 3), 6.0 * 0.86**3)


def test_draw_branch_emits_cylinder_and_cap():
    parent = Union()
    seg = draw_branch(parent, 20.0, 4.0, 3.0, "Sienna", fn=24)

    assert parent.children == [seg]
    assert isinstance(seg, Color)
    assert seg.name == "Sienna"

    cyl, tip = seg.children
    assert cyl == Cylinder(h=20.0, d1=4.0, d2=3.0, fn=24)
    assert isinstance(tip, Translate)
    assert tip.vector == (0.0, 0.0, 20.0)
    assert tip.children == [Sphere(r=1.5, fn=24)]
