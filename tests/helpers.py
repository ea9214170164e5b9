import numpy as np

from contagion_sims.core import SquareArena, create_subject

ARENA = SquareArena.of_side(500.0)


def make(pos, direction=(1.0, 0.0), speed=1.0, radius=5.0, sick=False, sick_time=0.0, frozen=False):
    return create_subject(
        pos=np.array(pos, dtype=float),
        direction=np.array(direction, dtype=float),
        speed=speed,
        radius=radius,
        sick=sick,
        sick_time=sick_time,
        frozen=frozen,
    )
