from tropism_tree.points import show_points
from tropism_tree.scene import Color, Cylinder, Sphere, Translate, count_primitives


def test_markers_are_colored_spheres():
    scene = show_points([(1, 2, 3), (4, 5, 6)], [(-1, 0, 0)], size=2.5, fn=8)

    green, red = scene.children
    assert isinstance(green, Color) and green.name == "green"
    assert isinstance(red, Color) and red.name == "red"
    assert len(green.children) == 2
    assert len(red.children) == 1

    marker = green.children[1]
    assert isinstance(marker, Translate)
    assert marker.vector == (4.0, 5.0, 6.0)
    assert marker.children == [Sphere(r=2.5, fn=8)]


def test_no_tree_geometry():
    scene = show_points([(0, 0, 0)], [(1, 1, 1)])
    assert count_primitives(scene, Cylinder) == 0
    assert count_primitives(scene, Sphere) == 2


def test_empty_lists_give_empty_scene():
    assert show_points([], []).children == []
