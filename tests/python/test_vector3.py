from __future__ import annotations

import math

import pytest

from numdot.vector2 import Vector2
from numdot.vector3 import Vector3


def test_constructors():
    assert Vector3().to_tuple() == (0.0, 0.0, 0.0)
    assert Vector3(1, 2).to_tuple() == (1.0, 2.0, 0.0)
    assert Vector3(1, 2, 3).to_tuple() == (1.0, 2.0, 3.0)
    assert Vector3.from_vector2(Vector2(4, 5)).to_tuple() == (4.0, 5.0, 0.0)
    assert Vector3(4, 5, 6).to_vector2().to_tuple() == (4.0, 5.0)


def test_from_sequence():
    assert Vector3.from_sequence([5]).to_tuple() == (5.0, 0.0, 0.0)
    assert Vector3.from_sequence([]).to_tuple() == (0.0, 0.0, 0.0)
    assert Vector3.from_sequence([0, 1, 2, 3, 4], 2).to_tuple() == (2.0, 3.0, 4.0)
    assert Vector3.from_sequence((x * 1.5 for x in range(10)), 1).to_tuple() == (1.5, 3.0, 4.5)


def test_round_trip_through_sequence():
    v = Vector3(0.1, -2.5, 1e3)
    assert Vector3.from_sequence(list(v)) == v
    assert Vector3.from_sequence(v.to_numpy()) == v


def test_index_access():
    v = Vector3(1, 2, 3)
    assert [v[i] for i in range(3)] == [1.0, 2.0, 3.0]
    v[2] = -1
    assert v.z == -1.0
    with pytest.raises(IndexError):
        v[3]
    with pytest.raises(IndexError):
        v[-1] = 0


def test_magnitude_and_normalization():
    v = Vector3(2, 3, 6)
    assert v.sqr_magnitude == 49.0
    assert v.magnitude == 7.0
    assert v.normalized == Vector3(2 / 7, 3 / 7, 6 / 7)
    assert Vector3(0, 0, 1e-6).normalized.to_tuple() == (0.0, 0.0, 0.0)

    v.normalize()
    assert v.magnitude == pytest.approx(1.0, abs=1e-6)


def test_set_requires_all_components():
    v = Vector3()
    v.set(1, 2, 3)
    assert v.to_tuple() == (1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        v.set(1, 2)


def test_cross_product():
    assert Vector3.cross(Vector3.right, Vector3.up) == Vector3.forward
    assert Vector3.cross(Vector3.up, Vector3.right) == Vector3.back

    a, b = Vector3(1, 2, 3), Vector3(-4, 0.5, 2)
    c = Vector3.cross(a, b)
    assert c == -Vector3.cross(b, a)
    assert Vector3.dot(c, a) == pytest.approx(0.0, abs=1e-5)
    assert Vector3.dot(c, b) == pytest.approx(0.0, abs=1e-5)

    cos_theta = Vector3.dot(a, b) / (a.magnitude * b.magnitude)
    sin_theta = math.sqrt(1 - cos_theta * cos_theta)
    assert c.magnitude == pytest.approx(a.magnitude * b.magnitude * sin_theta, rel=1e-5)


def test_cross_rejects_vector2():
    with pytest.raises(TypeError):
        Vector3.cross(Vector3.up, Vector2.up)


def test_dot_and_distance():
    a, b = Vector3(1, 2, 3), Vector3(4, -5, 6)
    assert Vector3.dot(a, b) == 12.0
    assert Vector3.dot(b, a) == Vector3.dot(a, b)
    assert Vector3.distance(Vector3(), Vector3(2, 3, 6)) == 7.0


def test_operators():
    a, b = Vector3(2, 4, 6), Vector3(1, 2, -3)
    assert (a + b).to_tuple() == (3.0, 6.0, 3.0)
    assert (a - b).to_tuple() == (1.0, 2.0, 9.0)
    assert (-b).to_tuple() == (-1.0, -2.0, 3.0)
    assert (0.5 * a).to_tuple() == (1.0, 2.0, 3.0)
    assert (a * b).to_tuple() == (2.0, 8.0, -18.0)
    assert (a / b).to_tuple() == (2.0, 2.0, -2.0)
    assert (a % 4).to_tuple() == (2.0, 0.0, 2.0)
    assert (a % b).to_tuple() == (0.0, 0.0, 0.0)


def test_zero_divisors_raise():
    with pytest.raises(ZeroDivisionError):
        Vector3(1, 2, 3) / 0.0
    with pytest.raises(ZeroDivisionError):
        Vector3(1, 2, 3) / Vector3(1, 1, 0)


def test_clamp_magnitude():
    v = Vector3(2, 3, 6)
    clamped = Vector3.clamp_magnitude(v, 3.5)
    assert clamped == Vector3(1, 1.5, 3)
    assert clamped.magnitude <= 3.5 + 1e-6
    assert Vector3.clamp_magnitude(v, 7).to_tuple() == v.to_tuple()


def test_lerp_and_component_extremes():
    a, b = Vector3(0, 0, 0), Vector3(2, 4, 8)
    assert Vector3.lerp(a, b, 0.25) == Vector3(0.5, 1, 2)
    assert Vector3.lerp(a, b, 3) == b
    assert Vector3.lerp_unclamped(a, b, 1.5) == Vector3(3, 6, 12)
    assert Vector3.min(Vector3(1, 5, -2), Vector3(3, 2, 0)).to_tuple() == (1.0, 2.0, -2.0)
    assert Vector3.max(Vector3(1, 5, -2), Vector3(3, 2, 0)).to_tuple() == (3.0, 5.0, 0.0)
    assert Vector3.scale(a + Vector3.one, b).to_tuple() == (2.0, 4.0, 8.0)


def test_reductions():
    v = Vector3(4, -1, 2.5)
    assert v.sum == 5.5
    assert v.min_element == -1.0
    assert v.max_element == 4.0


def test_constants():
    assert Vector3.forward.to_tuple() == (0.0, 0.0, 1.0)
    assert Vector3.back.to_tuple() == (0.0, 0.0, -1.0)
    assert Vector3.up.to_tuple() == (0.0, 1.0, 0.0)
    assert Vector3.down.to_tuple() == (0.0, -1.0, 0.0)
    assert Vector3.left.to_tuple() == (-1.0, 0.0, 0.0)
    assert Vector3.right.to_tuple() == (1.0, 0.0, 0.0)
    assert Vector3.one.to_tuple() == (1.0, 1.0, 1.0)
    assert all(c == -math.inf for c in Vector3.negative_infinity)
    assert all(c == math.inf for c in Vector3.positive_infinity)


def test_vector3_has_no_angle_helpers():
    assert not hasattr(Vector3, "angle")
    assert not hasattr(Vector3, "perpendicular")


def test_cross_rejects_two_vector2_operands():
    with pytest.raises(TypeError):
        Vector3.cross(Vector2(1, 0), Vector2(0, 1))


@pytest.mark.parametrize("bad", [None, "2", 3j])
def test_non_real_components_are_rejected(bad):
    with pytest.raises(TypeError):
        Vector3(1, 2, bad)
    with pytest.raises(TypeError):
        Vector3.from_sequence([1.5, bad])
    with pytest.raises(TypeError):
        Vector3().set(1, bad, 3)
