"""Kernel settings for simplification runs."""

from collections.abc import Mapping
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field


class SimplifyOptions(BaseModel):
    """Options for Ramer-Douglas-Peucker simplification."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    epsilon: float = Field(
        default=1.0, ge=0, description="Maximum allowed deviation of a dropped point"
    )
    max_workers: int = Field(
        default=1, ge=1, description="Worker threads used when simplifying many geometries"
    )


class KernelSettings(BaseModel):
    """Complete settings for the geometry kernel.

    Settings are immutable; :meth:`with_overrides` returns a new instance.
    Unknown keys are rejected so a misspelt option never passes silently.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Optional[str] = Field(default=None, description="Preset name, if loaded from one")
    simplify: SimplifyOptions = Field(
        default_factory=SimplifyOptions, description="Simplification options"
    )

    @classmethod
    def from_yaml(cls, text: str) -> "KernelSettings":
        """Parse settings from a YAML document.

        An empty document gives the defaults.

        Raises:
            ValueError: If the document is not a mapping
            pydantic.ValidationError: If a value is out of range or a key is unknown
        """
        data = yaml.safe_load(text)
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(
                f"Settings document must be a mapping, got {type(data).__name__}"
            )
        return cls.model_validate(data)

    def with_overrides(self, override: Mapping[str, Any]) -> "KernelSettings":
        """Return a copy with ``override`` applied.

        The ``simplify`` section is updated option by option, so
        ``{"simplify": {"epsilon": 0.5}}`` keeps the current ``max_workers``.
        Other keys replace their value outright.
        """
        data = self.model_dump()
        for key, value in override.items():
            if key == "simplify" and isinstance(value, Mapping):
                data["simplify"] = {**data["simplify"], **value}
            else:
                data[key] = value
        return KernelSettings.model_validate(data)
