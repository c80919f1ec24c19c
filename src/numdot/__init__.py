"""Single precision 2D/3D vector types and scalar helpers."""

from . import mathf
from .config import FormatConfig, NumdotConfig, configure, get_config, load_config
from .vector2 import Vector2
from .vector3 import Vector3
from .vector_base import EPSILON

__all__ = [
    "EPSILON",
    "FormatConfig",
    "NumdotConfig",
    "Vector2",
    "Vector3",
    "configure",
    "get_config",
    "load_config",
    "mathf",
]
