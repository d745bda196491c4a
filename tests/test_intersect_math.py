import math

import pytest

from surfcad.intersect_math import (
    BoundingBox,
    aabb,
    aabb2,
    bezier_basis,
    mm_to_u,
    u_to_mm,
    u_to_w,
    uv_dist,
    uw_to_uh,
    w_to_u,
)


def test_uv_dist_same_point_is_zero():
    assert uv_dist((0.3, 0.4, 0.3, 0.4), (1, 2, 3), (4, 5, 6)) == 0


def test_uv_dist_symmetric_and_linear():
    du, dv = (1.0, 0.5, 0.0), (0.0, 2.0, 1.0)
    d = uv_dist((0.3, 0.4, 0.1, 0.9), du, dv)
    assert math.isclose(d, uv_dist((0.1, 0.9, 0.3, 0.4), du, dv))
    doubled = uv_dist((0.3, 0.4, 0.1, 0.9), [2 * c for c in du], [2 * c for c in dv])
    assert math.isclose(doubled, 2 * d)


def test_aabb_overlap():
    a = BoundingBox((0, 0, 0), (2, 2, 2))
    b = BoundingBox((1, 1, 1), (3, 3, 3))
    assert aabb(a, b)
    assert aabb(b, a)


def test_aabb_disjoint_in_z():
    a = BoundingBox((0, 0, 0), (2, 2, 2))
    b = BoundingBox((1, 1, 5), (3, 3, 6))
    assert not aabb(a, b)
    assert aabb2(a, b)


def test_aabb_touching_is_not_overlap():
    a = BoundingBox((0, 0, 0), (1, 1, 1))
    b = BoundingBox((1, 0, 0), (2, 1, 1))
    assert not aabb(a, b)
    assert not aabb2(a, b)


@pytest.mark.parametrize("t", [0.0, 0.2, 0.5, 0.77, 1.0])
def test_bezier_basis_partition_of_unity(t):
    b, db = bezier_basis(t)
    assert math.isclose(sum(b), 1.0)
    assert abs(sum(db)) < 1e-12


def test_bezier_basis_endpoints():
    assert bezier_basis(0.0)[0] == (1.0, 0.0, 0.0, 0.0)
    assert bezier_basis(1.0)[0] == (0.0, 0.0, 0.0, 1.0)


@pytest.mark.parametrize("t", [0.1, 0.4, 0.9])
def test_bezier_derivative_matches_finite_difference(t):
    h = 1e-6
    lo, _ = bezier_basis(t - h)
    hi, _ = bezier_basis(t + h)
    _, db = bezier_basis(t)
    for i in range(4):
        assert math.isclose((hi[i] - lo[i]) / (2 * h), db[i], abs_tol=1e-6)


def test_unit_constants():
    assert u_to_w(1) == 54
    assert u_to_mm(1) == 150
    assert math.isclose(uw_to_uh(50 - 16), 150)


@pytest.mark.parametrize("x", [0.0, 0.37, 5.5])
def test_unit_round_trips(x):
    assert math.isclose(w_to_u(u_to_w(x)), x, abs_tol=1e-12)
    assert math.isclose(mm_to_u(u_to_mm(x)), x, abs_tol=1e-12)