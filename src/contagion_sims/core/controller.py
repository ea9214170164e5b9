from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Optional

import numpy as np

from .config import SICK_TIME_UNIT, SimConfig
from .recording import FrameSnapshot
from .world import World


@dataclass
class SimulationController:
    """
    Start/stop/recreate logic behind an interactive view.

    The periodic driver (a GUI timer, FuncAnimation, a plain loop) calls
    `tick()` at `config.tick_interval_ms`; it only steps while running.
    Every parameter change rebuilds the population and leaves the controller
    stopped.

    Intended usage:
        controller = SimulationController(SimConfig())
        controller.start()
        timer.connect(controller.tick)
        slider.connect(controller.update_number)
    """

    config: SimConfig
    generator: Optional[np.random.Generator] = None
    on_snapshot: Optional[Callable[[FrameSnapshot], None]] = None
    world: World = field(init=False)
    _running: bool = field(default=False, init=False)

    def __post_init__(self):
        self.world = World.from_config(self.config, generator=self.generator)

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            raise RuntimeError("Simulation is already running")
        self._running = True

    def stop(self) -> None:
        if not self._running:
            raise RuntimeError("Simulation is not running")
        self._running = False

    def tick(self) -> FrameSnapshot | None:
        if not self._running:
            return None
        events = self.world.step()
        return self._publish(self.world.snapshot(events))

    def recreate(self) -> FrameSnapshot:
        if self._running:
            self.stop()
        self.world = World.from_config(self.config, generator=self.generator)
        return self._publish(self.world.snapshot())

    def resize(self, side: float) -> FrameSnapshot:
        """The drawing surface changed size; regenerate inside the new bounds."""
        return self._update(arena_size=float(side))

    # --- parameter setters, one per control ---

    def update_number(self, value: int) -> FrameSnapshot:
        return self._update(n_subjects=int(value))

    def update_speed(self, value: int) -> FrameSnapshot:
        return self._update(minimal_speed=float(value))

    def update_radius(self, value: int) -> FrameSnapshot:
        return self._update(radius=float(value))

    def update_sick_time(self, value: int) -> FrameSnapshot:
        return self._update(sick_time=SICK_TIME_UNIT * float(value))

    def update_sick_percentage(self, value: int, capacity: int = 100) -> FrameSnapshot:
        """`value` is a slider position out of `capacity` steps."""
        return self._update(sick_percentage=float(value) / float(capacity))

    def update_freeze_percentage(self, value: int, capacity: int = 100) -> FrameSnapshot:
        return self._update(freeze_percentage=float(value) / float(capacity))

    def _update(self, **changes) -> FrameSnapshot:
        self.config = replace(self.config, **changes)
        return self.recreate()

    def _publish(self, snapshot: FrameSnapshot) -> FrameSnapshot:
        if self.on_snapshot is not None:
            self.on_snapshot(snapshot)
        return snapshot
