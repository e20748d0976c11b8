"""Configuration for graph generation and circle layout."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, fields, replace
from typing import Any


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


@dataclass
class PathFinderConfig:
    """Tunable options shared by the builder and the layout engine."""

    w_min: float = 0.1
    w_max: float = 100.0
    separation: float = 100.0
    max_iterations: int = 10000
    items_min: int = 10
    items_max: int = 22
    x_offset: float = 50.0
    y_offset: float = 50.0
    draw_adjust: float = 2.0
    edge_density: float = 1.3
    radius: float = 25.0
    integer_weights: bool = True

    def validate(self) -> "PathFinderConfig":
        if self.w_min <= 0:
            raise ConfigError(f"w_min must be positive (got {self.w_min})")
        if self.w_min > self.w_max:
            raise ConfigError(f"w_min={self.w_min} exceeds w_max={self.w_max}")
        if self.integer_weights and math.ceil(self.w_min) > math.floor(self.w_max):
            raise ConfigError(
                f"no integer weight lies in [{self.w_min}, {self.w_max}]; "
                "set integer_weights=False for continuous weights"
            )
        if self.items_min < 0:
            raise ConfigError(f"items_min must be non-negative (got {self.items_min})")
        if self.items_min > self.items_max:
            raise ConfigError(f"items_min={self.items_min} exceeds items_max={self.items_max}")
        if self.radius <= 0:
            raise ConfigError(f"radius must be positive (got {self.radius})")
        if self.separation < 0:
            raise ConfigError(f"separation must be non-negative (got {self.separation})")
        if self.max_iterations < 0:
            raise ConfigError(f"max_iterations must be non-negative (got {self.max_iterations})")
        return self

    def with_overrides(self, **overrides: Any) -> "PathFinderConfig":
        """Return a validated copy with ``overrides`` applied."""

        known = {item.name for item in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"unknown configuration option(s): {', '.join(unknown)}")
        return replace(self, **overrides).validate()


_DEFAULT_CONFIG = PathFinderConfig()


def default_config(**overrides: Any) -> PathFinderConfig:
    config = copy.deepcopy(_DEFAULT_CONFIG)
    if overrides:
        return config.with_overrides(**overrides)
    return config.validate()
