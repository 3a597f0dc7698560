"""Bundled simplification presets.

Presets are read-only YAML documents shipped inside the package; there is
no API for writing them.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from ..models.settings import KernelSettings

logger = logging.getLogger(__name__)

PRESETS_DIR = Path(__file__).parent


def preset_names() -> list[str]:
    """Names of the bundled presets, sorted."""
    return sorted(path.stem for path in PRESETS_DIR.glob("*.yaml"))


def load_preset(
    name: str = "default",
    override: Optional[Mapping[str, Any]] = None,
) -> KernelSettings:
    """Load a bundled preset, optionally adjusted by ``override``.

    Args:
        name: Preset name, e.g. "default", "coarse" or "fine"
        override: Values applied on top of the preset
            (see :meth:`KernelSettings.with_overrides`)

    Returns:
        KernelSettings for the preset

    Raises:
        FileNotFoundError: If no bundled preset has that name
    """
    path = PRESETS_DIR / f"{name}.yaml"
    if not path.is_file():
        raise FileNotFoundError(
            f"Unknown preset '{name}' (available: {', '.join(preset_names())})"
        )

    settings = KernelSettings.from_yaml(path.read_text())
    if override:
        settings = settings.with_overrides(override)

    logger.debug(
        f"Preset '{name}': epsilon={settings.simplify.epsilon}, "
        f"max_workers={settings.simplify.max_workers}"
    )
    return settings
