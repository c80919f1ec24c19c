from __future__ import annotations

import locale
import math
import numbers
import operator
from itertools import islice
from typing import Any, Callable, ClassVar, Iterable, Iterator, List, Optional, Tuple, Type, TypeVar

import numpy as np

from . import mathf
from .config import get_config

# Per-component tolerance used by vector equality and normalization.
EPSILON = 0.00001

V = TypeVar("V", bound="VectorBase")


class ClassConstant:
    """Class attribute that builds a fresh vector on every access."""

    def __init__(self, *components: float) -> None:
        self._components = components

    def __get__(self, instance: Any, owner: Type[V]) -> V:
        return owner(*self._components)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real)


def _require_same_type(a: "VectorBase", b: "VectorBase") -> None:
    if type(a) is not type(b):
        raise TypeError(f"expected two {type(a).__name__} operands, got {type(b).__name__}")


def _fmod(a: float, b: float) -> float:
    with np.errstate(invalid="ignore"):
        return float(np.fmod(a, b))


def _format_component(value: float, format_spec: str, use_locale: bool) -> str:
    if use_locale:
        return locale.format_string("%" + (format_spec or "g"), value, grouping=True)
    if not format_spec:
        return str(np.float32(value))
    return format(value, format_spec)


class VectorBase:
    """Component machinery shared by :class:`Vector2` and :class:`Vector3`.

    Subclasses are slotted dataclasses that list their component names in
    ``_fields``. Every component write is rounded to single precision.
    """

    __slots__ = ()

    _fields: ClassVar[Tuple[str, ...]] = ()

    # Make numpy scalars defer to our reflected operators instead of broadcasting.
    __array_ufunc__ = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._fields:
            value = mathf.to_float32(value)
        object.__setattr__(self, name, value)

    @classmethod
    def from_sequence(cls: Type[V], values: Iterable[float], start: int = 0) -> V:
        """Build a vector from ``values[start:]``.

        Missing trailing components are zero, extra values are ignored.
        """
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        picked = list(islice(values, start, start + len(cls._fields)))
        picked.extend([0.0] * (len(cls._fields) - len(picked)))
        return cls(*picked)

    def components(self) -> Tuple[float, ...]:
        return tuple(getattr(self, name) for name in self._fields)

    def _assign(self, values: Iterable[float]) -> None:
        # Convert everything first so a bad value leaves the vector untouched.
        converted = [mathf.to_float32(value) for value in values]
        if len(converted) != len(self._fields):
            raise TypeError(f"{type(self).__name__} takes {len(self._fields)} components, got {len(converted)}")
        for name, value in zip(self._fields, converted):
            object.__setattr__(self, name, value)

    def copy(self: V) -> V:
        return type(self)(*self.components())

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[float]:
        return iter(self.components())

    def _field_for(self, index: Any) -> str:
        index = operator.index(index)
        if not 0 <= index < len(self._fields):
            raise IndexError(f"Invalid {type(self).__name__} index: {index}")
        return self._fields[index]

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._field_for(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._field_for(index), value)

    def to_tuple(self) -> Tuple[float, ...]:
        return self.components()

    def to_list(self) -> List[float]:
        return list(self.components())

    def to_numpy(self) -> np.ndarray:
        return np.array(self.components(), dtype=np.float32)

    # Derived values

    @property
    def sqr_magnitude(self) -> float:
        return mathf.to_float32(sum(c * c for c in self.components()))

    @property
    def magnitude(self) -> float:
        return mathf.to_float32(math.sqrt(self.sqr_magnitude))

    @property
    def normalized(self: V) -> V:
        """Unit vector in the same direction, or zero when the magnitude is within EPSILON."""
        mag = self.magnitude
        if mag > EPSILON:
            return self / mag
        return type(self)()

    @property
    def sum(self) -> float:
        return mathf.to_float32(sum(self.components()))

    @property
    def min_element(self) -> float:
        return mathf.minimum(self.components())

    @property
    def max_element(self) -> float:
        return mathf.maximum(self.components())

    # Mutators

    def normalize(self) -> None:
        self._assign(self.normalized.components())

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(abs(a - b) <= EPSILON for a, b in zip(self.components(), other.components()))

    # Mutable, and tolerance equality is not transitive.
    __hash__ = None  # type: ignore[assignment]

    # Arithmetic

    def _combine(self: V, other: V, op: Callable[[float, float], float]) -> V:
        return type(self)(*(op(a, b) for a, b in zip(self.components(), other.components())))

    def _apply(self: V, scalar: float, op: Callable[[float, float], float]) -> V:
        return type(self)(*(op(a, scalar) for a in self.components()))

    def _check_divisor(self, other: Any) -> None:
        if isinstance(other, VectorBase):
            if any(c == 0 for c in other.components()):
                raise ZeroDivisionError(f"{type(self).__name__} divisor has a zero component: {other!r}")
        elif other == 0:
            raise ZeroDivisionError(f"{type(self).__name__} division by zero")

    def __pos__(self: V) -> V:
        return self.copy()

    def __neg__(self: V) -> V:
        return type(self)(*(-c for c in self.components()))

    def __add__(self: V, other: Any) -> V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._combine(other, operator.add)

    def __sub__(self: V, other: Any) -> V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._combine(other, operator.sub)

    def __mul__(self: V, other: Any) -> V:
        if isinstance(other, type(self)):
            return self._combine(other, operator.mul)
        if _is_scalar(other):
            return self._apply(other, operator.mul)
        return NotImplemented

    def __rmul__(self: V, other: Any) -> V:
        if _is_scalar(other):
            return self._apply(other, operator.mul)
        return NotImplemented

    def __truediv__(self: V, other: Any) -> V:
        if isinstance(other, type(self)):
            self._check_divisor(other)
            return self._combine(other, operator.truediv)
        if _is_scalar(other):
            self._check_divisor(other)
            return self._apply(other, operator.truediv)
        return NotImplemented

    def __mod__(self: V, other: Any) -> V:
        """Truncated remainder per component; the result takes the sign of the dividend."""
        if isinstance(other, type(self)):
            self._check_divisor(other)
            return self._combine(other, _fmod)
        if _is_scalar(other):
            self._check_divisor(other)
            return self._apply(other, _fmod)
        return NotImplemented

    # Geometry shared by both arities

    @staticmethod
    def distance(a: V, b: V) -> float:
        return (a - b).magnitude

    @staticmethod
    def dot(a: V, b: V) -> float:
        _require_same_type(a, b)
        return mathf.to_float32(sum(x * y for x, y in zip(a.components(), b.components())))

    @staticmethod
    def clamp_magnitude(vector: V, max_length: float) -> V:
        """Copy of ``vector`` shortened to ``max_length`` if it is longer."""
        sqr_mag = vector.sqr_magnitude
        if sqr_mag > max_length * max_length:
            mag = math.sqrt(sqr_mag)
            return type(vector)(*(c / mag * max_length for c in vector.components()))
        return vector.copy()

    @staticmethod
    def lerp(a: V, b: V, t: float) -> V:
        """Interpolate between ``a`` and ``b`` with ``t`` clamped to [0, 1]."""
        return VectorBase.lerp_unclamped(a, b, mathf.clamp01(t))

    @staticmethod
    def lerp_unclamped(a: V, b: V, t: float) -> V:
        _require_same_type(a, b)
        return type(a)(*(mathf.lerp_unclamped(x, y, t) for x, y in zip(a.components(), b.components())))

    @staticmethod
    def min(a: V, b: V) -> V:
        _require_same_type(a, b)
        return type(a)(*(mathf.minimum(x, y) for x, y in zip(a.components(), b.components())))

    @staticmethod
    def max(a: V, b: V) -> V:
        _require_same_type(a, b)
        return type(a)(*(mathf.maximum(x, y) for x, y in zip(a.components(), b.components())))

    @staticmethod
    def scale(a: V, b: V) -> V:
        _require_same_type(a, b)
        return a * b

    # Formatting

    def to_string(self, format_spec: Optional[str] = None, use_locale: Optional[bool] = None) -> str:
        """Format each component with ``format_spec`` and wrap them in parentheses.

        Components use the locale independent format mini-language unless
        ``use_locale`` is set, in which case ``format_spec`` is a printf style
        spec (without the ``%``) applied with the process locale.
        """
        config = get_config().format
        if format_spec is None:
            format_spec = config.component_format
        if use_locale is None:
            use_locale = config.use_locale
        parts = [_format_component(c, format_spec, use_locale) for c in self.components()]
        return "(" + config.separator.join(parts) + ")"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.to_string()
        return self.to_string(format_spec)
