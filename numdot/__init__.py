from __future__ import annotations

from pathlib import Path
from pkgutil import extend_path

__path__ = extend_path(__path__, __name__)

_SRC_PACKAGE = Path(__file__).resolve().parent.parent / "src" / "numdot"
if _SRC_PACKAGE.is_dir():
    __path__.append(str(_SRC_PACKAGE))

from . import mathf  # noqa: E402
from .config import FormatConfig, NumdotConfig, configure, get_config, load_config  # noqa: E402
from .vector2 import Vector2  # noqa: E402
from .vector3 import Vector3  # noqa: E402
from .vector_base import EPSILON  # noqa: E402

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
