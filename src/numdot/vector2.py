"""Two component single precision vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Tuple

from . import mathf
from .vector_base import ClassConstant, VectorBase

if TYPE_CHECKING:
    from .vector3 import Vector3

_INF = math.inf


@dataclass(slots=True, eq=False)
class Vector2(VectorBase):
    x: float = 0.0
    y: float = 0.0

    _fields: ClassVar[Tuple[str, ...]] = ("x", "y")

    zero = ClassConstant(0.0, 0.0)
    one = ClassConstant(1.0, 1.0)
    up = ClassConstant(0.0, 1.0)
    down = ClassConstant(0.0, -1.0)
    left = ClassConstant(-1.0, 0.0)
    right = ClassConstant(1.0, 0.0)
    positive_infinity = ClassConstant(_INF, _INF)
    negative_infinity = ClassConstant(-_INF, -_INF)

    @classmethod
    def from_vector3(cls, v: "Vector3") -> "Vector2":
        """Drop the z component."""
        return cls(v.x, v.y)

    def to_vector3(self, z: float = 0.0) -> "Vector3":
        from .vector3 import Vector3

        return Vector3(self.x, self.y, z)

    def set(self, x: float, y: float) -> None:
        self._assign((x, y))

    @staticmethod
    def angle(a: "Vector2", b: "Vector2") -> float:
        """Unsigned angle between ``a`` and ``b`` in radians, in [0, pi].

        Zero length operands give NaN rather than an error.
        """
        denominator = a.magnitude * b.magnitude
        if denominator == 0:
            return math.nan
        cosine = mathf.clamp(Vector2.dot(a, b) / denominator, -1.0, 1.0)
        return mathf.to_float32(math.acos(cosine))

    @staticmethod
    def angle_deg(a: "Vector2", b: "Vector2") -> float:
        return mathf.to_float32(Vector2.angle(a, b) * mathf.RAD_TO_DEG)

    @staticmethod
    def perpendicular(v: "Vector2") -> "Vector2":
        """``v`` rotated 90 degrees counter-clockwise."""
        return Vector2(-v.y, v.x)
