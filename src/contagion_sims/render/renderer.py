# src/contagion_sims/render/renderer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from contagion_sims.core.subject import Status
from contagion_sims.themes import THEME_REGISTRY, SubjectTheme

if TYPE_CHECKING:
    from contagion_sims.core.boundary import SquareArena
    from contagion_sims.core.recording import FrameSnapshot


@dataclass
class RendererConfig:
    figsize: tuple[float, float] = (10.0, 5.0)
    dpi: int = 100
    background_color: str = "white"
    world_color: str = "white"
    boundary_color: str = "dimgray"
    theme: str = "status"
    show_curves: bool = True
    show_hud: bool = True
    capacity: float = 0.2   # fraction of the population, drawn as a flat line


class MatplotlibRenderer:
    """
    Draws frame snapshots: the arena outline, every subject as a circle, and
    optionally the epidemic curves next to it.

    Holds on to the last snapshot it was given; it never sees live subjects.
    """

    def __init__(self, arena: SquareArena, config: RendererConfig | None = None, theme: SubjectTheme | None = None):
        self.arena = arena
        self.config = config or RendererConfig()
        self.theme = theme if theme is not None else THEME_REGISTRY[self.config.theme]()
        self.fig = None
        self.ax = None
        self.curve_ax = None
        self.last_snapshot: FrameSnapshot | None = None
        self._history: list[tuple[float, int, int, int]] = []  # (t, sick, recovered, population)

    def init_figure(self):
        if self.config.show_curves:
            fig, (ax, curve_ax) = plt.subplots(1, 2, figsize=self.config.figsize, dpi=self.config.dpi)
        else:
            fig, ax = plt.subplots(figsize=(self.config.figsize[1], self.config.figsize[1]), dpi=self.config.dpi)
            curve_ax = None
        fig.patch.set_facecolor(self.config.background_color)
        self.fig, self.ax, self.curve_ax = fig, ax, curve_ax
        return fig

    def reset_history(self) -> None:
        self._history.clear()

    def render_snapshot(self, snapshot: FrameSnapshot, *, ax: Axes | None = None) -> None:
        """Draw a single frame snapshot, replacing whatever was drawn before."""
        if self.fig is None:
            self.init_figure()
        ax = ax or self.ax
        self.last_snapshot = snapshot
        if snapshot.tick == 0:
            self.reset_history()
        c = snapshot.counts
        self._history.append((snapshot.t, c.sick, c.recovered, c.total))

        ax.clear()
        self._setup_axes(ax)
        self.arena.plot(
            ax=ax,
            facecolor=self.config.world_color,
            edgecolor=self.config.boundary_color,
            linewidth=2,
        )
        for state in snapshot.subjects:
            self.theme.draw_subject(ax, state)
        ax.invert_yaxis()  # screen coordinates, y grows downward
        if self.config.show_hud:
            title = f"t = {snapshot.t:.0f}   healthy {c.healthy}   sick {c.sick}   recovered {c.recovered}"
            outside = self.count_outside(snapshot)
            if outside:
                title += f"   outside {outside}"
            ax.set_title(title, fontsize=9)
        if self.curve_ax is not None:
            self.render_curves(self._curves(), ax=self.curve_ax)

    def count_outside(self, snapshot: FrameSnapshot) -> int:
        """Subjects whose circle pokes out of the arena; wall reflection does not clamp."""
        return sum(
            not self.arena.contains(np.asarray(s.pos), radius=s.radius)
            for s in snapshot.subjects
        )

    def render_curves(self, curves: dict[str, np.ndarray], *, ax: Axes) -> None:
        plot_curves(curves, ax=ax, theme=self.theme)

    def _curves(self) -> dict[str, np.ndarray]:
        data = np.array(self._history, dtype=float).reshape(-1, 4)
        return {
            "t": data[:, 0],
            "sick": data[:, 1],
            "recovered": data[:, 2],
            "total_sick": data[:, 1] + data[:, 2],
            "capacity": self.config.capacity * data[:, 3],
        }

    def _setup_axes(self, ax: Axes) -> None:
        ax.set_facecolor(self.config.background_color)
        ax.set_aspect("equal", adjustable="box")
        ax.set_axis_off()


def plot_curves(curves: dict[str, np.ndarray], ax: Axes | None = None, theme: SubjectTheme | None = None):
    """
    Epidemic chart: currently sick, recovered, ever infected, and the
    capacity line.
    """
    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure
    theme = theme or THEME_REGISTRY["status"]()

    ax.clear()
    t = curves["t"]
    ax.plot(t, curves["sick"], color=theme.color_for(Status.SICK), label="sick")
    ax.plot(t, curves["recovered"], color=theme.color_for(Status.RECOVERED), label="recovered")
    ax.plot(t, curves["total_sick"], color="black", linestyle=":", label="total sick")
    ax.plot(t, curves["capacity"], color="gray", linestyle="--", label="capacity")
    ax.set_xlabel("t")
    ax.set_ylabel("subjects")
    ax.legend(loc="upper left", fontsize=8)
    return fig, ax
