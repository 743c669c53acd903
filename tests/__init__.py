"""Test package for coachtree."""

from __future__ import annotations

import sys
from pathlib import Path


# Allow ``pytest`` from a plain checkout by putting src/ on the path.
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if SRC_ROOT.exists() and str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))
