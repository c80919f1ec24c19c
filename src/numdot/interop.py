"""Conversions between numdot vectors, ``pygame.math`` vectors and numpy arrays."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from pygame.math import Vector2 as PgVector2
from pygame.math import Vector3 as PgVector3

from .vector2 import Vector2
from .vector3 import Vector3

AnyVector = Union[Vector2, Vector3]


def _by_length(values: Sequence[float]) -> AnyVector:
    if len(values) == 2:
        return Vector2.from_sequence(values)
    if len(values) == 3:
        return Vector3.from_sequence(values)
    raise ValueError(f"expected 2 or 3 components, got {len(values)}")


def to_pygame(vector: AnyVector) -> Union[PgVector2, PgVector3]:
    if isinstance(vector, Vector3):
        return PgVector3(vector.x, vector.y, vector.z)
    return PgVector2(vector.x, vector.y)


def from_pygame(vector: Union[PgVector2, PgVector3]) -> AnyVector:
    return _by_length(vector)


def from_numpy(array: np.ndarray) -> AnyVector:
    return _by_length(np.asarray(array).ravel())
