"""Unit tests for nearest-point selection and steering vectors."""

import numpy as np
from numpy.testing import assert_allclose

from tropism_tree.steering import closest_point, influence_vector, normalize


def test_normalize_unit_and_zero():
    assert_allclose(normalize([3.0, 4.0, 0.0]), [0.6, 0.8, 0.0])
    assert_allclose(normalize([0.0, 0.0, 0.0]), [0.0, 0.0, 0.0])


def test_closest_point_picks_nearest():
    p = closest_point((1.0, 0.0, 0.0), [(0.0, 0.0, 0.0), (10.0, 0.0, 0.0)])
    assert_allclose(p, [0.0, 0.0, 0.0])


def test_closest_point_tie_breaks_by_list_order():
    p = closest_point((0.0, 0.0, 0.0), [(1.0, 0.0, 0.0), (-1.0, 0.0, 0.0)])
    assert_allclose(p, [1.0, 0.0, 0.0])


def test_closest_point_empty_is_none():
    assert closest_point((0.0, 0.0, 0.0), []) is None


def test_influence_no_points_is_zero():
    assert_allclose(influence_vector((1.0, 2.0, 3.0), [], []), [0.0, 0.0, 0.0])


def test_influence_towards_attractor():
    v = influence_vector((0.0, 0.0, 0.0), [(0.0, 0.0, 100.0)], [])
    assert_allclose(v, [0.0, 0.0, 1.0])


def test_influence_away_from_repeller():
    v = influence_vector((0.0, 0.0, 0.0), [], [(10.0, 0.0, 0.0)])
    assert_allclose(v, [-1.0, 0.0, 0.0])


def test_attractor_at_origin_is_a_real_point():
    v = influence_vector((0.0, 0.0, 5.0), [(0.0, 0.0, 0.0)], [])
    assert_allclose(v, [0.0, 0.0, -1.0])


def test_exact_cancellation_yields_zero():
    v = influence_vector((0.0, 0.0, 0.0), [(1.0, 0.0, 0.0)], [(1.0, 0.0, 0.0)])
    assert_allclose(v, [0.0, 0.0, 0.0], atol=1e-12)


def test_combined_influence_is_unit_length():
    gen = np.random.Generator(np.random.PCG64(3))
    for _ in range(20):
        pos = gen.uniform(-50, 50, size=3)
        attract = gen.uniform(-100, 100, size=(4, 3))
        repel = gen.uniform(-100, 100, size=(3, 3))
        v = influence_vector(pos, attract, repel)
        nrm = np.linalg.norm(v)
        assert np.isclose(nrm, 1.0) or np.isclose(nrm, 0.0)


def test_only_nearest_points_contribute():
    v = influence_vector(
        (0.0, 0.0, 0.0),
        [(0.0, 5.0, 0.0), (0.0, -50.0, 0.0)],
        [(0.0, 0.0, 100.0)],
    )
    expected = np.array([0.0, 1.0, -1.0]) / np.sqrt(2.0)
    assert_allclose(v, expected)
