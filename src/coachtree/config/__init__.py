"""Configuration helpers for canvas layout."""

from .layout import LayoutSettings, setting_names

__all__ = [
    "LayoutSettings",
    "setting_names",
]
