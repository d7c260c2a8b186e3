"""Game configuration with sensible defaults."""

from __future__ import annotations

import math
from dataclasses import dataclass

from worldofbits.core.enums import EvictionPolicy
from worldofbits.core.models import INT32_MAX, INT32_MIN, CellCoord


class ConfigError(ValueError):
    """Raised at construction time for an unusable configuration."""


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one game session."""

    # World
    world_seed: int = 42
    spawn_probability: float = 0.1
    value_exponents: int = 4               # spawned values are 2**0 .. 2**(n-1)

    # Map anchoring (cell (0, 0) has its south-west corner at the origin)
    origin_lat: float = 36.997936938057016
    origin_lng: float = -122.05703507501151
    tile_degrees: float = 1e-4
    gameplay_zoom: int = 19

    # Player
    start_i: int = 0
    start_j: int = 0
    neighborhood_size: int = 3

    # Rules
    win_threshold: int = 64
    eviction_policy: EvictionPolicy = EvictionPolicy.PERSISTENT

    # API
    max_viewport_cells: int = 10000
    event_log_size: int = 500

    # Logging
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not -(1 << 63) <= self.world_seed < (1 << 63):
            raise ConfigError(f"world_seed must fit in a signed 64-bit integer, got {self.world_seed}")
        if not 0.0 < self.spawn_probability <= 1.0:
            raise ConfigError(f"spawn_probability must be in (0, 1], got {self.spawn_probability}")
        if not isinstance(self.neighborhood_size, int) or isinstance(self.neighborhood_size, bool):
            raise ConfigError(f"neighborhood_size must be an integer, got {self.neighborhood_size!r}")
        if self.neighborhood_size <= 0:
            raise ConfigError(f"neighborhood_size must be positive, got {self.neighborhood_size}")
        if self.win_threshold <= 0:
            raise ConfigError(f"win_threshold must be positive, got {self.win_threshold}")
        if self.value_exponents < 1:
            raise ConfigError(f"value_exponents must be at least 1, got {self.value_exponents}")
        if not self.tile_degrees > 0 or math.isinf(self.tile_degrees):
            raise ConfigError(f"tile_degrees must be positive and finite, got {self.tile_degrees}")
        if not (math.isfinite(self.origin_lat) and -90.0 <= self.origin_lat <= 90.0):
            raise ConfigError(f"origin_lat must be a latitude, got {self.origin_lat}")
        if not (math.isfinite(self.origin_lng) and -180.0 <= self.origin_lng <= 180.0):
            raise ConfigError(f"origin_lng must be a longitude, got {self.origin_lng}")
        if self.max_viewport_cells <= 0:
            raise ConfigError(f"max_viewport_cells must be positive, got {self.max_viewport_cells}")
        side = 2 * self.neighborhood_size + 1
        if side * side > self.max_viewport_cells:
            raise ConfigError(
                f"neighborhood_size {self.neighborhood_size} covers {side * side} cells, "
                f"more than max_viewport_cells={self.max_viewport_cells}"
            )
        if self.event_log_size <= 0:
            raise ConfigError(f"event_log_size must be positive, got {self.event_log_size}")
        for name in ("start_i", "start_j"):
            value = getattr(self, name)
            if not INT32_MIN <= value <= INT32_MAX:
                raise ConfigError(f"{name} must fit in a signed 32-bit integer, got {value}")
        if not isinstance(self.eviction_policy, EvictionPolicy):
            try:
                object.__setattr__(self, "eviction_policy", EvictionPolicy(self.eviction_policy))
            except ValueError as exc:
                raise ConfigError(f"unknown eviction_policy {self.eviction_policy!r}") from exc

    @property
    def start(self) -> CellCoord:
        return CellCoord(self.start_i, self.start_j)
