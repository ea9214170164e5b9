# src/contagion_sims/core/subject.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

import numpy as np

NOT_SICK = -1.0  # sick_time_remaining sentinel for healthy/recovered subjects


class Status(str, Enum):
    HEALTHY = "healthy"
    SICK = "sick"
    RECOVERED = "recovered"


@dataclass
class Subject:
    """
    One simulated individual.

    - pos: arena-space centre, shape (2,)
    - direction: unit vector, shape (2,); only ever sign-flipped, so it stays unit
    - speed: distance per unit time, fixed once generated
    - sick_time_remaining: countdown to recovery while SICK, NOT_SICK otherwise
    - frozen: never moves, but still collides and takes part in infection

    Every field is required; there is no meaningful default subject.
    """
    pos: np.ndarray
    direction: np.ndarray
    speed: float
    radius: float
    status: Status
    sick_time_remaining: float
    frozen: bool

    @property
    def is_sick(self) -> bool:
        return self.status is Status.SICK

    def infect(self, sick_time: float) -> bool:
        """Make a healthy subject sick. Sick and recovered subjects are unaffected."""
        if self.status is not Status.HEALTHY:
            return False
        self.status = Status.SICK
        self.sick_time_remaining = float(sick_time)
        return True


def create_subject(
    pos: np.ndarray,
    direction: np.ndarray,
    speed: float,
    radius: float,
    sick: bool = False,
    sick_time: float = 0.0,
    frozen: bool = False,
) -> Subject:
    """Helper that keeps status and sick timer consistent."""
    return Subject(
        pos=np.asarray(pos, dtype=float).copy(),
        direction=np.asarray(direction, dtype=float).copy(),
        speed=float(speed),
        radius=float(radius),
        status=Status.SICK if sick else Status.HEALTHY,
        sick_time_remaining=float(sick_time) if sick else NOT_SICK,
        frozen=bool(frozen),
    )
