# src/contagion_sims/core/events.py

from __future__ import annotations
from dataclasses import dataclass
import numpy as np
from abc import ABC


@dataclass(kw_only=True)
class BaseEvent(ABC):
    """Marker base class so you can type on 'list[BaseEvent]'."""
    t: float  # simulation time of the tick that produced the event
    a_id: int | None = None  # population index
    b_id: int | None = None

    def to_payload_dict(self) -> dict:
        """Convert event-specific data to a serializable dict."""
        return {}


@dataclass(kw_only=True)
class CollisionEvent(BaseEvent):
    a_id: int              # acting subject
    b_id: int              # subject it ran into
    pos: np.ndarray        # acting subject's corrected position (2,)
    distance: float        # centre distance that triggered the collision

    def to_payload_dict(self) -> dict:
        return {
            "pos": self.pos.tolist(),
            "distance": self.distance,
        }


@dataclass(kw_only=True)
class HitWallEvent(BaseEvent):
    subject_id: int
    axis: int  # 0 = x, 1 = y

    def __post_init__(self):
        self.a_id = self.subject_id

    def to_payload_dict(self) -> dict:
        return {"axis": self.axis}


@dataclass(kw_only=True)
class InfectionEvent(BaseEvent):
    subject_id: int
    source_id: int

    def __post_init__(self):
        self.a_id = self.subject_id
        self.b_id = self.source_id


@dataclass(kw_only=True)
class RecoveryEvent(BaseEvent):
    subject_id: int
    overshoot: float  # how far below zero the sick timer went

    def __post_init__(self):
        self.a_id = self.subject_id

    def to_payload_dict(self) -> dict:
        return {"overshoot": self.overshoot}
