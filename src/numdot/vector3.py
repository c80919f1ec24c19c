"""Three component single precision vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

from .vector2 import Vector2
from .vector_base import ClassConstant, VectorBase, _require_same_type

_INF = math.inf


@dataclass(slots=True, eq=False)
class Vector3(VectorBase):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _fields: ClassVar[Tuple[str, ...]] = ("x", "y", "z")

    zero = ClassConstant(0.0, 0.0, 0.0)
    one = ClassConstant(1.0, 1.0, 1.0)
    up = ClassConstant(0.0, 1.0, 0.0)
    down = ClassConstant(0.0, -1.0, 0.0)
    left = ClassConstant(-1.0, 0.0, 0.0)
    right = ClassConstant(1.0, 0.0, 0.0)
    forward = ClassConstant(0.0, 0.0, 1.0)
    back = ClassConstant(0.0, 0.0, -1.0)
    positive_infinity = ClassConstant(_INF, _INF, _INF)
    negative_infinity = ClassConstant(-_INF, -_INF, -_INF)

    @classmethod
    def from_vector2(cls, v: Vector2) -> "Vector3":
        return cls(v.x, v.y, 0.0)

    def to_vector2(self) -> Vector2:
        """Narrow to a Vector2; z is discarded."""
        return Vector2(self.x, self.y)

    def set(self, x: float, y: float, z: float) -> None:
        self._assign((x, y, z))

    @staticmethod
    def cross(a: "Vector3", b: "Vector3") -> "Vector3":
        """Right-handed cross product, perpendicular to both inputs."""
        if not isinstance(a, Vector3):
            raise TypeError(f"expected two Vector3 operands, got {type(a).__name__}")
        _require_same_type(a, b)
        return Vector3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )
