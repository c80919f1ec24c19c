import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from numdot.config import configure, get_config  # noqa: E402


@pytest.fixture(autouse=True)
def restore_config():
    previous = get_config()
    yield
    configure(previous)
