# src/contagion_sims/core/world.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

import numpy as np
import matplotlib.pyplot as plt

from .boundary import SquareArena
from .config import SimConfig
from .events import BaseEvent
from .physics import step_subjects
from .population import generate_subjects
from .recording import FrameSnapshot, SimulationRecording, snapshot_subjects
from .subject import Subject


@dataclass
class World:
    config: SimConfig
    arena: SquareArena
    subjects: List[Subject] = field(default_factory=list)
    time: float = 0.0
    tick: int = 0

    @classmethod
    def from_config(
        cls,
        config: SimConfig,
        arena: SquareArena | None = None,
        generator: np.random.Generator | None = None,
    ) -> "World":
        world = cls(config=config, arena=arena if arena is not None else config.make_arena())
        world.regenerate(generator)
        return world

    @property
    def n_subjects(self) -> int:
        return len(self.subjects)

    def regenerate(self, generator: np.random.Generator | None = None) -> None:
        """
        Replace the population with a freshly generated one and reset the clock.

        The old list is not touched, so anyone still holding it (or a snapshot
        of it) keeps a consistent view.
        """
        self.subjects = generate_subjects(self.config, self.arena, generator)
        self.time = 0.0
        self.tick = 0

    def step(self) -> List[BaseEvent]:
        """Advance every subject by one tick of `config.delta_t`."""
        events = step_subjects(
            self.subjects,
            self.arena,
            sick_time=self.config.sick_time,
            dt=self.config.delta_t,
            t=self.time,
        )
        self.time += self.config.delta_t
        self.tick += 1
        return events

    def snapshot(self, events: List[BaseEvent] | None = None) -> FrameSnapshot:
        return snapshot_subjects(self.subjects, t=self.time, tick=self.tick, events=events or ())

    def plot(self, ax=None, theme=None):
        """Quick look at the current population: arena outline plus coloured circles."""
        from contagion_sims.themes import StatusColorTheme

        theme = theme or StatusColorTheme()
        if ax is None:
            fig, ax = plt.subplots()
        else:
            fig = ax.figure
        self.arena.plot(ax=ax, edgecolor="gray", facecolor="none", linewidth=2)
        for state in self.snapshot().subjects:
            theme.draw_subject(ax, state)
        ax.invert_yaxis()  # y grows downward, as on screen
        return fig, ax


def run_simulation(
    world: World,
    n_ticks: int,
    log_interval: int = 1000,
    *,
    record_events: bool = True,
) -> SimulationRecording:
    """
    Step the world forward n_ticks and record a snapshot after every tick.
    The first frame is the initial population.
    """
    recording = SimulationRecording()
    recording.add_frame(world.snapshot())
    for step in range(n_ticks):
        events = world.step()
        recording.add_frame(world.snapshot(events if record_events else None))
        if (step + 1) % log_interval == 0:
            counts = recording.frames[-1].counts
            print(f"Simulated {world.tick} / {n_ticks} ticks (t = {world.time:.1f})...")
            print(f"Healthy: {counts.healthy}  Sick: {counts.sick}  Recovered: {counts.recovered}")
    return recording
