# src/contagion_sims/core/boundary.py
from dataclasses import dataclass
from typing import List

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .subject import Subject
from .events import HitWallEvent, BaseEvent


@dataclass(frozen=True)
class SquareArena:
    """
    Square region [0, side] x [0, side] the subjects move in.

    Bounds come from the drawing surface; a non-square surface is a
    programming error and is rejected on construction.
    """
    width: float
    height: float

    def __post_init__(self):
        if self.width != self.height:
            raise ValueError(f"Arena must be square, got {self.width} x {self.height}")
        if self.width <= 0:
            raise ValueError(f"Arena side must be positive, got {self.width}")

    @classmethod
    def of_side(cls, side: float) -> "SquareArena":
        return cls(width=float(side), height=float(side))

    @property
    def side(self) -> float:
        return self.height

    def contains(self, pos: np.ndarray, radius: float = 0.0) -> bool:
        """True if a circle of `radius` centred at `pos` lies fully inside."""
        x, y = float(pos[0]), float(pos[1])
        return (
            x - radius >= 0.0
            and x + radius <= self.width
            and y - radius >= 0.0
            and y + radius <= self.height
        )

    def sample_position(self, generator: np.random.Generator) -> np.ndarray:
        """Uniform point in [0, side) on both axes; radius is not subtracted."""
        return generator.uniform(0.0, self.side, size=2)

    def reflect(
        self,
        subject: Subject,
        candidate: np.ndarray,
        dt: float,
        *,
        t: float,
        subject_id: int,
    ) -> List[BaseEvent]:
        """
        Bounce `candidate` off the walls, axis by axis.

        When the candidate circle touches or crosses a wall on an axis, that
        direction component flips and the candidate is pushed a further
        2 * speed * dt along the new direction on that axis. Mutates both
        `subject.direction` and `candidate`; the result is not guaranteed to be
        back inside the arena.
        """
        events: List[BaseEvent] = []
        r = subject.radius
        step = subject.speed * dt * 2.0
        for axis in (0, 1):
            if candidate[axis] - r <= 0.0 or candidate[axis] + r >= self.side:
                subject.direction[axis] = -subject.direction[axis]
                candidate[axis] += subject.direction[axis] * step
                events.append(HitWallEvent(t=t, subject_id=subject_id, axis=axis))
        return events

    def bounds(self) -> tuple[float, float, float, float]:
        return 0.0, self.width, 0.0, self.height

    def plot(self, ax=None, delta=0, **kwargs):
        """
        Draw the arena outline.

        Parameters
        ----------
        ax : matplotlib.axes.Axes, optional
            Axes to draw on. If None, a new figure and axes are created.
        **kwargs :
            Passed to Rectangle, e.g. edgecolor, facecolor, linewidth.

        Returns
        -------
        ax or (fig, ax)
        """
        created_fig = False
        if ax is None:
            fig, ax = plt.subplots()
            created_fig = True

        ax.add_patch(Rectangle((0.0, 0.0), self.width, self.height, **kwargs))
        xmin, xmax, ymin, ymax = self.bounds()
        ax.set_xlim(xmin - delta, xmax + delta)
        ax.set_ylim(ymin - delta, ymax + delta)
        ax.set_aspect("equal", adjustable="box")

        if created_fig:
            return fig, ax
        return ax
