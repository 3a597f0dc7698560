"""Settings presets: YAML files shipped with the package and their loader."""

from .loader import load_preset, preset_names

__all__ = [
    "load_preset",
    "preset_names",
]
