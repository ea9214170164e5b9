# src/contagion_sims/core/recording.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, Sequence
from pathlib import Path
import pickle
import lzma
import numpy as np

from .subject import Status

if TYPE_CHECKING:
    from .events import BaseEvent
    from .subject import Subject


@dataclass(frozen=True)
class StatusCounts:
    healthy: int = 0
    sick: int = 0
    recovered: int = 0

    @property
    def total(self) -> int:
        return self.healthy + self.sick + self.recovered

    @property
    def ever_sick(self) -> int:
        """Everyone who has been infected so far (recovery is terminal)."""
        return self.sick + self.recovered


def count_statuses(subjects: Sequence["Subject"]) -> StatusCounts:
    healthy = sick = recovered = 0
    for s in subjects:
        if s.status is Status.HEALTHY:
            healthy += 1
        elif s.status is Status.SICK:
            sick += 1
        else:
            recovered += 1
    return StatusCounts(healthy=healthy, sick=sick, recovered=recovered)


@dataclass(frozen=True)
class SubjectStateSnapshot:
    """What a renderer needs to draw one subject."""
    pos: tuple[float, float]
    radius: float
    status: Status
    frozen: bool


@dataclass
class EventSnapshot:
    t: float
    type: str               # e.g. "CollisionEvent", "InfectionEvent"
    a_id: int | None = None
    b_id: int | None = None
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass
class FrameSnapshot:
    """
    Read-only copy of the population after one tick.

    Renderers only ever see these, never the live subject list.
    """
    t: float
    tick: int
    subjects: tuple[SubjectStateSnapshot, ...]
    counts: StatusCounts
    events: list[EventSnapshot] = field(default_factory=list)


@dataclass
class SimulationRecording:
    """
    Frames of one finished run, kept for rendering and the epidemic curves.

    `meta` holds config, seed, etc.
    """
    frames: list[FrameSnapshot] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)

    def add_frame(self, frame: FrameSnapshot) -> None:
        self.frames.append(frame)

    @property
    def times(self) -> list[float]:
        return [f.t for f in self.frames]

    @property
    def t_end(self) -> float | None:
        """Time of the last frame, or None if no frames."""
        if not self.frames:
            return None
        return self.frames[-1].t

    def iter_events(self) -> Iterator[EventSnapshot]:
        """Iterate over all EventSnapshots in time order."""
        for frame in self.frames:
            yield from frame.events

    def curves(self, capacity: float = 0.0) -> dict[str, np.ndarray]:
        """
        Per-frame series for the epidemic chart: sick, recovered, total sick
        (ever infected), and the flat capacity line (`capacity` * population).
        """
        sick = np.array([f.counts.sick for f in self.frames], dtype=int)
        recovered = np.array([f.counts.recovered for f in self.frames], dtype=int)
        population = np.array([f.counts.total for f in self.frames], dtype=float)
        return {
            "t": np.array(self.times, dtype=float),
            "sick": sick,
            "recovered": recovered,
            "total_sick": sick + recovered,
            "capacity": capacity * population,
        }

    def save(self, path: str | Path) -> None:
        path = Path(path)
        with lzma.open(path, "wb") as f:
            pickle.dump(self, f, protocol=pickle.HIGHEST_PROTOCOL)

    @classmethod
    def load(cls, path: str | Path) -> "SimulationRecording":
        path = Path(path)
        with lzma.open(path, "rb") as f:
            rec = pickle.load(f)
        if not isinstance(rec, cls):
            raise ValueError(f"{path} does not hold a {cls.__name__}")
        return rec


def make_subject_snapshot(subject: "Subject") -> SubjectStateSnapshot:
    pos = np.asarray(subject.pos, dtype=float)
    return SubjectStateSnapshot(
        pos=(float(pos[0]), float(pos[1])),
        radius=float(subject.radius),
        status=subject.status,
        frozen=bool(subject.frozen),
    )


def snapshot_subjects(
    subjects: Sequence["Subject"],
    t: float,
    tick: int,
    events: Sequence["BaseEvent"] = (),
) -> FrameSnapshot:
    event_snaps = [
        EventSnapshot(
            t=e.t,
            type=type(e).__name__,
            a_id=e.a_id,
            b_id=e.b_id,
            payload=e.to_payload_dict(),
        )
        for e in events
    ]
    return FrameSnapshot(
        t=t,
        tick=tick,
        subjects=tuple(make_subject_snapshot(s) for s in subjects),
        counts=count_statuses(subjects),
        events=event_snaps,
    )
