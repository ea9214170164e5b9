# src/contagion_sims/core/config.py

from __future__ import annotations
from dataclasses import dataclass, fields
import math
from pathlib import Path

from .boundary import SquareArena

SICK_TIME_UNIT = 10.0  # sick-time slider step, in simulation time units


def _floor_share(fraction: float, n: int) -> int:
    # 0.29 * 100 is 28.999999999999996; drop the float noise before flooring
    return math.floor(round(fraction * n, 9))


@dataclass
class SimConfig:
    n_subjects: int = 100
    sick_percentage: float = 0.1
    freeze_percentage: float = 0.1
    radius: float = 5.0
    sick_time: float = SICK_TIME_UNIT * 50.0
    minimal_speed: float = 10.0   # upper/lower speed ratio
    speed_scale: float = 10000.0  # lower speed = arena side / speed_scale
    delta_t: float = 1.0          # simulation time per tick
    tick_interval_ms: int = 10    # wall-clock tick period for live drivers
    arena_size: float = 500.0
    capacity: float = 0.2         # fraction of the population, drawn on the curves

    def __post_init__(self):
        for name in ("sick_percentage", "freeze_percentage", "capacity"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
        if self.n_subjects < 0:
            raise ValueError(f"n_subjects must be non-negative, got {self.n_subjects}")
        if self.radius <= 0 or self.speed_scale <= 0 or self.delta_t <= 0:
            raise ValueError("radius, speed_scale and delta_t must be positive")
        if self.sick_time < 0:
            raise ValueError(f"sick_time must be non-negative, got {self.sick_time}")

    @property
    def n_sick(self) -> int:
        return _floor_share(self.sick_percentage, self.n_subjects)

    @property
    def n_frozen(self) -> int:
        return _floor_share(self.freeze_percentage, self.n_subjects)

    def make_arena(self) -> SquareArena:
        return SquareArena.of_side(self.arena_size)

    @classmethod
    def from_args(cls, args) -> "SimConfig":
        kwargs = {}
        for f in fields(cls):
            value = getattr(args, f.name, None)
            if value is not None:
                kwargs[f.name] = value
        return cls(**kwargs)

    @classmethod
    def from_preset(cls, path: str | Path, **overrides) -> "SimConfig":
        from contagion_sims.utils.preset_loader import load_preset

        resolved = load_preset(path).resolved
        known = {f.name for f in fields(cls)}
        unknown = set(resolved) - known
        if unknown:
            raise ValueError(f"Unknown preset keys: {sorted(unknown)}")
        resolved.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**resolved)
