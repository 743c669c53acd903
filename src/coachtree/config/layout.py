"""Layout constants for positioning coach nodes on the canvas."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, fields
from typing import Dict, Iterable


logger = logging.getLogger(__name__)

_ENV_PREFIX = "COACHTREE_"
_ZERO_ALLOWED = frozenset({"top_margin"})


@dataclass(frozen=True)
class LayoutSettings:
    min_width: float = 1000.0
    min_height: float = 600.0
    level_height: float = 200.0
    node_spacing: float = 180.0
    top_margin: float = 100.0
    node_radius: float = 60.0

    def __post_init__(self) -> None:
        for name, value in self.as_dict().items():
            if name in _ZERO_ALLOWED:
                if value < 0:
                    raise ValueError(f"{name} must be non-negative, got {value!r}")
            elif value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_env(cls) -> "LayoutSettings":
        """Build settings from defaults overridden by ``COACHTREE_*`` variables."""

        defaults = cls()
        values = {
            name: _env_float(
                f"{_ENV_PREFIX}{name.upper()}",
                default,
                inclusive=name in _ZERO_ALLOWED,
            )
            for name, default in defaults.as_dict().items()
        }
        return cls(**values)


def setting_names() -> Iterable[str]:
    """Return the names of all configurable layout settings."""

    return tuple(f.name for f in fields(LayoutSettings))


def _env_float(name: str, default: float, *, min_value: float = 0.0, inclusive: bool = False) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    too_small = value < min_value if inclusive else value <= min_value
    if not math.isfinite(value) or too_small:
        bound = ">=" if inclusive else ">"
        logger.warning(
            "Out of range value for %s: %s (must be %s %.2f); using default %.2f",
            name,
            raw,
            bound,
            min_value,
            default,
        )
        return default
    return value
