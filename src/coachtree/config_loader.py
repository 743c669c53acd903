"""Persist and load layout settings profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Optional

from coachtree.config import LayoutSettings, setting_names


@dataclass
class SettingsProfile:
    layout: Dict[str, float]

    @classmethod
    def load(cls, path: Path) -> "SettingsProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a JSON object")
        layout = data.get("layout", {})
        if not isinstance(layout, dict):
            raise ValueError(f"\"layout\" in {path} must be a JSON object")
        unknown = sorted(set(layout) - set(setting_names()))
        if unknown:
            raise ValueError(f"Unknown layout settings in {path}: {', '.join(unknown)}")
        return cls(layout={key: _as_float(key, value, path) for key, value in layout.items()})

    @classmethod
    def from_settings(cls, settings: LayoutSettings) -> "SettingsProfile":
        return cls(layout=settings.as_dict())

    def save(self, path: Path) -> None:
        payload = {"layout": self.layout}
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def to_settings(self, base: Optional[LayoutSettings] = None) -> LayoutSettings:
        """Overlay the profile on ``base`` (environment defaults when omitted)."""

        base = base or LayoutSettings.from_env()
        return replace(base, **self.layout)


def _as_float(key: str, value: object, path: Path) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"Layout setting {key!r} in {path} must be a number, got {value!r}")
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Layout setting {key!r} in {path} must be a number, got {value!r}") from None
