import math
from dataclasses import astuple

import pytest

from refprism.vector import (
    REFRACTIVE_RATIO,
    Color,
    Vector2,
    Vector3,
    Vector4,
    look_at_lh,
    rotation_rows,
)

TOL = 1e-9


def transform(point, matrix):
    return tuple(
        point.x * matrix[0][j] + point.y * matrix[1][j] + point.z * matrix[2][j] + matrix[3][j]
        for j in range(3)
    )


A = Vector3(1.0, 2.0, 3.0)
B = Vector3(4.0, -5.0, 6.0)


def test_add_sub_round_trip():
    assert (A + B) - B == A


def test_scalar_multiplication_commutes_and_divides_back():
    assert 2.5 * A == A * 2.5
    result = (A * 2.5) / 2.5
    assert astuple(result) == pytest.approx(astuple(A), abs=TOL)


def test_negation():
    assert -A == Vector3(-A.x, -A.y, -A.z)
    assert A + (-A) == Vector3()


def test_cross_is_perpendicular_and_anticommutative():
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0)
    assert c.dot(B) == pytest.approx(0.0)
    assert c == -(B.cross(A))


@pytest.mark.parametrize("vec", [A, B, Vector3(0.0, 0.0, 9.0), Vector3(-3.0, 4.0, 0.5)])
def test_normalize_gives_unit_length(vec):
    n = vec.normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(vec) == pytest.approx(vec.length())


def test_normalize_zero_vectors_stay_zero():
    assert Vector3().normalize() == Vector3()
    assert Vector2().normalize() == Vector2()


def test_vector2_normalize_unit():
    v = Vector2(3.0, -7.0)
    assert v.normalize().length() == pytest.approx(1.0)
    assert v.normalize().cross(v) == pytest.approx(0.0)


def test_vector2_componentwise_operations():
    v = Vector2(3.0, -7.0)
    w = Vector2(2.0, 5.0)
    assert (v * w) / w == v
    assert v.length_sqr() == pytest.approx(v.length() ** 2)


def test_length_sqr_matches_length():
    assert A.length_sqr() == pytest.approx(A.length() ** 2)


@pytest.mark.parametrize("normal", [Vector3(0.0, 0.0, 1.0), Vector3(1.0, 0.0, 1.0), Vector3(-2.0, 1.0, 0.3)])
def test_reflect_twice_returns_incident_direction(normal):
    incident = Vector3(1.0, -0.5, -2.0)
    result = incident.reflect(normal).reflect(normal)
    assert astuple(result) == pytest.approx(astuple(incident.normalize()), abs=TOL)


def test_reflect_mirrors_normal_component():
    incident = Vector3(1.0, 0.0, -2.0)
    normal = Vector3(0.0, 0.0, 1.0)
    reflected = incident.reflect(normal)
    assert reflected.length() == pytest.approx(1.0)
    assert reflected.dot(normal) == pytest.approx(-incident.normalize().dot(normal))


def test_reflect_head_on_reverses():
    result = Vector3(0.0, 0.0, -4.0).reflect(Vector3(0.0, 0.0, 1.0))
    assert astuple(result) == pytest.approx((0.0, 0.0, 1.0), abs=TOL)


def test_refract_head_on_keeps_direction():
    result = Vector3(0.0, 0.0, -4.0).refract(Vector3(0.0, 0.0, 1.0))
    assert astuple(result) == pytest.approx((0.0, 0.0, -1.0), abs=TOL)


@pytest.mark.parametrize("incident", [Vector3(1.0, 0.0, -1.0), Vector3(3.0, 0.0, -0.5), Vector3(-0.2, 0.0, -1.0)])
def test_refract_obeys_snell(incident):
    normal = Vector3(0.0, 0.0, 1.0)
    refracted = incident.refract(normal)
    sin_i = incident.normalize().cross(normal).length()
    sin_t = refracted.cross(normal).length()
    assert refracted.length() == pytest.approx(1.0)
    assert sin_t == pytest.approx(REFRACTIVE_RATIO * sin_i)
    assert refracted.dot(normal) < 0.0


def test_vector2_refract_obeys_snell():
    incident = Vector2(1.0, -1.0)
    normal = Vector2(0.0, 1.0)
    refracted = incident.refract(normal)
    assert abs(refracted.cross(normal)) == pytest.approx(
        REFRACTIVE_RATIO * abs(incident.normalize().cross(normal))
    )


def test_vector2_reflect_twice_round_trip():
    incident = Vector2(2.0, -1.0)
    normal = Vector2(1.0, 1.0)
    result = incident.reflect(normal).reflect(normal)
    assert astuple(result) == pytest.approx(astuple(incident.normalize()), abs=TOL)


def test_vector4_dot_ignores_w():
    assert Vector4(1.0, 2.0, 3.0, 100.0).dot(Vector4(4.0, 5.0, 6.0, 100.0)) == Vector3(1.0, 2.0, 3.0).dot(
        Vector3(4.0, 5.0, 6.0)
    )


def test_vector4_length_and_normalize():
    v = Vector4(1.0, 2.0, 3.0, 4.0)
    assert v.length_sqr() == pytest.approx(v.length() ** 2)
    assert v.normalize().length() == pytest.approx(1.0)


def test_vector4_zero_normalize_raises():
    with pytest.raises(ZeroDivisionError):
        Vector4().normalize()


def test_color_default_is_opaque_black():
    assert Color() == Color(0.0, 0.0, 0.0, 1.0)


def test_color_lerp_clamps_t():
    start = Color(0.1, 0.2, 0.3, 0.4)
    end = Color(0.9, 0.8, 0.7, 0.6)
    assert start.lerp(end, 5.0) == end
    assert start.lerp(end, -1.0) == start
    assert astuple(start.lerp(end, 0.5)) == pytest.approx((0.5, 0.5, 0.5, 0.5), abs=TOL)


def test_color_clamp_value_default_range():
    assert Color.clamp_value(0.5) == 0.0
    assert Color.clamp_value(0.5, 0.0, 1.0) == 0.5


def test_color_clamp():
    assert Color(2.0, -1.0, 0.5, 1.0).clamp() == Color(1.0, 0.0, 0.5, 1.0)


def test_color_normalize_keeps_alpha():
    c = Color(3.0, 4.0, 12.0, 0.25).normalize()
    assert math.sqrt(c.r ** 2 + c.g ** 2 + c.b ** 2) == pytest.approx(1.0)
    assert c.a == 0.25
    assert Color(0.0, 0.0, 0.0, 0.3).normalize() == Color(0.0, 0.0, 0.0, 0.3)


def test_color_arithmetic_round_trip():
    c = Color(0.5, 0.2, 0.2, 0.0)
    d = Color(0.2, 0.2, 0.2, 0.0)
    assert astuple((c + d) - d) == pytest.approx((0.5, 0.2, 0.2, 0.0), abs=TOL)
    assert astuple(2.0 * c) == pytest.approx((1.0, 0.4, 0.4, 0.0), abs=TOL)
    assert astuple(c * 2.0) == pytest.approx((1.0, 0.4, 0.4, 0.0), abs=TOL)


def test_rotation_rows_identity():
    right, up, forward = rotation_rows(0.0, 0.0, 0.0)
    assert (right, up, forward) == (Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0))


@pytest.mark.parametrize("angles", [(0.3, 1.2, -0.7), (1.0, -2.0, 0.5), (-0.4, 3.0, 2.2)])
def test_rotation_rows_are_orthonormal(angles):
    right, up, forward = rotation_rows(*angles)
    for row in (right, up, forward):
        assert row.length() == pytest.approx(1.0)
    assert right.dot(up) == pytest.approx(0.0, abs=1e-12)
    assert up.dot(forward) == pytest.approx(0.0, abs=1e-12)
    assert astuple(right.cross(up)) == pytest.approx(astuple(forward), abs=TOL)


@pytest.mark.parametrize("yaw", [0.5, -1.3, 2.8])
def test_yaw_only_forward_heading(yaw):
    _, up, forward = rotation_rows(0.0, yaw, 0.0)
    assert math.atan2(forward.x, forward.z) == pytest.approx(yaw)
    assert forward.y == pytest.approx(0.0)
    assert astuple(up) == pytest.approx((0.0, 1.0, 0.0), abs=TOL)


def test_look_at_maps_eye_to_origin_and_target_onto_z():
    eye = Vector3(0.0, 25.0, -1.0)
    target = Vector3(2.0, 0.0, 3.0)
    view = look_at_lh(eye, target, Vector3(0.0, 1.0, 0.0))
    assert transform(eye, view) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    assert transform(target, view) == pytest.approx((0.0, 0.0, (target - eye).length()), abs=1e-9)


def test_look_at_rejects_degenerate_input():
    with pytest.raises(ValueError):
        look_at_lh(A, A, Vector3(0.0, 1.0, 0.0))
    with pytest.raises(ValueError):
        look_at_lh(Vector3(), Vector3(0.0, 5.0, 0.0), Vector3(0.0, 1.0, 0.0))