# src/contagion_sims/themes/base.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from matplotlib.axes import Axes
from matplotlib.patches import Circle

from contagion_sims.core.recording import SubjectStateSnapshot
from contagion_sims.core.subject import Status
from contagion_sims.utils.plotting import color_to_rgb, lighten


class SubjectTheme(Protocol):
    """
    A pluggable visual theme for drawing subjects.

    The only contract is that the three statuses end up visually distinct.
    """

    def draw_subject(self, ax: Axes, state: SubjectStateSnapshot) -> None:
        ...

    def color_for(self, status: Status) -> tuple[float, float, float]:
        ...


@dataclass
class StatusColorTheme:
    """Filled circles coloured by status; frozen subjects are drawn paler."""
    healthy: str = "green"
    sick: str = "red"
    recovered: str = "blue"
    edgecolor: str | None = None
    frozen_lighten: float = 0.0

    def __post_init__(self):
        palette = [color_to_rgb(c) for c in (self.healthy, self.sick, self.recovered)]
        if len(set(palette)) != 3:
            raise ValueError("Healthy, sick and recovered colours must be distinct")

    def color_for(self, status: Status) -> tuple[float, float, float]:
        if status is Status.HEALTHY:
            return color_to_rgb(self.healthy)
        if status is Status.SICK:
            return color_to_rgb(self.sick)
        if status is Status.RECOVERED:
            return color_to_rgb(self.recovered)
        raise ValueError(f"Unknown status {status!r}")

    def draw_subject(self, ax: Axes, state: SubjectStateSnapshot) -> None:
        fc = self.color_for(state.status)
        if state.frozen and self.frozen_lighten > 0:
            fc = lighten(fc, self.frozen_lighten)
        ax.add_patch(Circle(
            state.pos,
            state.radius,
            facecolor=fc,
            edgecolor=self.edgecolor if self.edgecolor is not None else "none",
            linewidth=.35,
        ))
