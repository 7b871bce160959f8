"""Layout configuration with per-field overrides."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from numbers import Real
from typing import Any

from pedchart.errors import ConfigError


@dataclass(frozen=True)
class CanvasConfig:
    width: float = 1200
    height: float = 800
    padding: float = 50


@dataclass(frozen=True)
class SymbolConfig:
    size: float = 40  # side of a square / diameter of a circle
    stroke_width: float = 2
    spacing: float = 80  # minimum gap between neighbouring symbols


@dataclass(frozen=True)
class GenerationConfig:
    vertical_spacing: float = 120
    horizontal_spacing: float = 100  # extra gap after each couple


@dataclass(frozen=True)
class ConnectionConfig:
    stroke_width: float = 2
    marriage_line_length: float = 60
    child_connection_offset: float = 20


@dataclass(frozen=True)
class LayoutConfig:
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    symbols: SymbolConfig = field(default_factory=SymbolConfig)
    generations: GenerationConfig = field(default_factory=GenerationConfig)
    connections: ConnectionConfig = field(default_factory=ConnectionConfig)

    def __post_init__(self):
        for section in fields(self):
            values = getattr(self, section.name)
            for f in fields(values):
                value = getattr(values, f.name)
                if isinstance(value, bool) or not isinstance(value, Real):
                    raise ConfigError(
                        f"{section.name}.{f.name} must be a number, got {value!r}"
                    )
                if not math.isfinite(value):
                    raise ConfigError(f"{section.name}.{f.name} must be finite, got {value}")
                if value < 0:
                    raise ConfigError(f"{section.name}.{f.name} must not be negative, got {value}")
        if self.symbols.size <= 0:
            raise ConfigError(f"symbols.size must be positive, got {self.symbols.size}")

    @classmethod
    def from_dict(cls, overrides: Mapping[str, Any] | None = None) -> "LayoutConfig":
        """
        Build a config from a partial nested mapping.

        Only the fields present in `overrides` replace the defaults, e.g.
        ``{"symbols": {"size": 30}}`` keeps every other symbol setting.
        """
        return cls().merged({} if overrides is None else overrides)

    def merged(self, overrides: Mapping[str, Any]) -> "LayoutConfig":
        """Return a copy of this config with `overrides` applied per field."""
        if not isinstance(overrides, Mapping):
            raise ConfigError(f"Config must be a mapping, got {overrides!r}")
        sections = {f.name for f in fields(self)}
        changes = {}
        for section_name, section_overrides in overrides.items():
            if section_name not in sections:
                raise ConfigError(f"Unknown config section: {section_name!r}")
            if not isinstance(section_overrides, Mapping):
                raise ConfigError(f"Config section {section_name!r} must be a mapping")

            section = getattr(self, section_name)
            known = {f.name for f in fields(section)}
            unknown = set(section_overrides) - known
            if unknown:
                raise ConfigError(
                    f"Unknown field(s) in config section {section_name!r}: {sorted(unknown)}"
                )
            changes[section_name] = replace(section, **section_overrides)

        return replace(self, **changes)
