# src/contagion_sims/core/__init__.py

from .config import SimConfig
from .subject import NOT_SICK, Status, Subject, create_subject
from .boundary import SquareArena
from .population import generate_subjects
from .physics import step_subjects
from .world import World, run_simulation
from .controller import SimulationController
from .recording import (
    FrameSnapshot,
    SimulationRecording,
    StatusCounts,
    SubjectStateSnapshot,
    count_statuses,
)
from .events import (
    BaseEvent,
    CollisionEvent,
    HitWallEvent,
    InfectionEvent,
    RecoveryEvent,
)

__all__ = [
    "SimConfig",
    "NOT_SICK",
    "Status",
    "Subject",
    "create_subject",
    "SquareArena",
    "generate_subjects",
    "step_subjects",
    "World",
    "run_simulation",
    "SimulationController",
    "FrameSnapshot",
    "SimulationRecording",
    "StatusCounts",
    "SubjectStateSnapshot",
    "count_statuses",
    "BaseEvent",
    "CollisionEvent",
    "HitWallEvent",
    "InfectionEvent",
    "RecoveryEvent",
]
