"""Small vector, colour and matrix helpers used by the game objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Union

Number = Union[int, float]
Row = Tuple[float, float, float, float]
Matrix4 = Tuple[Row, Row, Row, Row]

# Ratio of refractive indices used when a beam enters the crystal.
REFRACTIVE_RATIO = 1.0 / 1.5


def _reflect(vec, normal):
    incident = vec.normalize()
    n = normal.normalize()
    # Keep the normal facing against the incoming direction.
    if incident.dot(n) > 0.0:
        n = -n
    return (incident - 2.0 * incident.dot(n) * n).normalize()


def _refract(vec, normal):
    incident = vec.normalize()
    n = normal.normalize()
    eta = REFRACTIVE_RATIO
    if incident.dot(n) > 0.0:
        n = -n
    cos_i = -incident.dot(n)
    sin_t2 = eta * eta * (1.0 - cos_i * cos_i)
    if sin_t2 > 1.0:
        # Total internal reflection.
        return _reflect(vec, normal)
    cos_t = math.sqrt(1.0 - sin_t2)
    return (eta * incident + (eta * cos_i - cos_t) * n).normalize()


@dataclass(frozen=True)
class Vector2:
    """Two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector2()
        return self / length

    def reflect(self, normal: Vector2) -> Vector2:
        return _reflect(self, normal)

    def refract(self, normal: Vector2) -> Vector2:
        return _refract(self, normal)


@dataclass(frozen=True)
class Vector3:
    """Three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector3()
        return self / length

    def reflect(self, normal: Vector3) -> Vector3:
        return _reflect(self, normal)

    def refract(self, normal: Vector3) -> Vector3:
        return _refract(self, normal)


@dataclass(frozen=True)
class Vector4:
    """Four-dimensional vector; its dot product uses x, y and z only."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __add__(self, other: Vector4) -> Vector4:
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4) -> Vector4:
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return Vector4(self.x / other, self.y / other, self.z / other, self.w / other)
        return NotImplemented

    def dot(self, other: Vector4) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def normalize(self) -> Vector4:
        """Unit vector; raises ZeroDivisionError for the zero vector."""
        return self / self.length()


@dataclass(frozen=True)
class Color:
    """RGBA colour with components as floats."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __sub__(self, other: Color) -> Color:
        return Color(self.r - other.r, self.g - other.g, self.b - other.b, self.a - other.a)

    def __neg__(self) -> Color:
        return Color(-self.r, -self.g, -self.b, -self.a)

    def __mul__(self, other):
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b, self.a * other.a)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other, self.a * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Color(other * self.r, other * self.g, other * self.b, other * self.a)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return Color(self.r / other, self.g / other, self.b / other, self.a / other)
        return NotImplemented

    def lerp(self, other: Color, t: float) -> Color:
        """Linear blend towards ``other``; ``t`` is clamped to [0, 1]."""
        t = self.clamp_value(t, 0.0, 1.0)
        return Color(
            (1 - t) * self.r + t * other.r,
            (1 - t) * self.g + t * other.g,
            (1 - t) * self.b + t * other.b,
            (1 - t) * self.a + t * other.a,
        )

    @staticmethod
    def clamp_value(value: float, low: float = 0.0, high: float = 0.0) -> float:
        if value < low:
            return low
        if value > high:
            return high
        return value

    def clamp(self, low: float = 0.0, high: float = 1.0) -> Color:
        return Color(
            self.clamp_value(self.r, low, high),
            self.clamp_value(self.g, low, high),
            self.clamp_value(self.b, low, high),
            self.clamp_value(self.a, low, high),
        )

    def normalize(self) -> Color:
        """Scale RGB to unit length, leaving alpha alone; black stays black."""
        magnitude = math.sqrt(self.r * self.r + self.g * self.g + self.b * self.b)
        if magnitude > 0.0:
            return Color(self.r / magnitude, self.g / magnitude, self.b / magnitude, self.a)
        return self


def rotation_rows(pitch: float, yaw: float, roll: float) -> Tuple[Vector3, Vector3, Vector3]:
    """Right, up and forward rows of the roll-pitch-yaw rotation matrix."""
    cp, sp = math.cos(pitch), math.sin(pitch)
    cy, sy = math.cos(yaw), math.sin(yaw)
    cr, sr = math.cos(roll), math.sin(roll)
    right = Vector3(cr * cy + sr * sp * sy, sr * cp, -cr * sy + sr * sp * cy)
    up = Vector3(-sr * cy + cr * sp * sy, cr * cp, sr * sy + cr * sp * cy)
    forward = Vector3(cp * sy, -sp, cp * cy)
    return right, up, forward


def look_at_lh(eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
    """Left-handed view matrix (row-vector convention) looking from eye to target."""
    direction = target - eye
    if direction.length_sqr() == 0.0:
        raise ValueError("eye and target coincide")
    z_axis = direction.normalize()
    x_axis = up.cross(z_axis)
    if x_axis.length_sqr() == 0.0:
        raise ValueError("up vector is parallel to the view direction")
    x_axis = x_axis.normalize()
    y_axis = z_axis.cross(x_axis)
    neg_eye = -eye
    return (
        (x_axis.x, y_axis.x, z_axis.x, 0.0),
        (x_axis.y, y_axis.y, z_axis.y, 0.0),
        (x_axis.z, y_axis.z, z_axis.z, 0.0),
        (x_axis.dot(neg_eye), y_axis.dot(neg_eye), z_axis.dot(neg_eye), 1.0),
    )