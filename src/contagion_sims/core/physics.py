# src/contagion_sims/core/physics.py

from __future__ import annotations
from typing import List, Sequence

import numpy as np

from .boundary import SquareArena
from .events import BaseEvent, CollisionEvent, InfectionEvent, RecoveryEvent
from .subject import Status, Subject


def step_subjects(
    subjects: Sequence[Subject],
    arena: SquareArena,
    sick_time: float,
    dt: float,
    t: float = 0.0,
) -> List[BaseEvent]:
    """
    Advance every subject by one tick of length dt, in list order, in place.

    Subjects later in the list see the already-updated state of earlier ones
    (positions, directions and statuses), and every pair is checked from both
    sides, so a pair that touches is usually resolved twice per tick.
    """
    events: List[BaseEvent] = []
    for i, subject in enumerate(subjects):
        events.extend(_decay_sickness(subject, dt, t=t, subject_id=i))
        if subject.frozen:
            continue

        candidate = subject.pos + subject.direction * subject.speed * dt
        events.extend(arena.reflect(subject, candidate, dt, t=t, subject_id=i))
        events.extend(_resolve_collisions(subjects, i, candidate, sick_time, dt, t=t))
        subject.pos = candidate
    return events


def _decay_sickness(subject: Subject, dt: float, *, t: float, subject_id: int) -> List[BaseEvent]:
    if subject.status is not Status.SICK:
        return []
    if subject.sick_time_remaining < 0.0:
        raise ValueError(
            f"Subject {subject_id} entered the step sick with a negative timer "
            f"({subject.sick_time_remaining})"
        )
    subject.sick_time_remaining -= dt
    if subject.sick_time_remaining < 0.0:
        # timer is left negative, it is ignored once recovered
        subject.status = Status.RECOVERED
        return [RecoveryEvent(t=t, subject_id=subject_id, overshoot=-subject.sick_time_remaining)]
    return []


def _resolve_collisions(
    subjects: Sequence[Subject],
    i: int,
    candidate: np.ndarray,
    sick_time: float,
    dt: float,
    *,
    t: float,
) -> List[BaseEvent]:
    """
    Check subject i's candidate position against every other subject's
    current position. No early exit: one subject can bounce several times.
    """
    events: List[BaseEvent] = []
    subject = subjects[i]
    step = subject.speed * dt * 2.0
    for j, other in enumerate(subjects):
        if j == i:
            continue
        distance = float(np.linalg.norm(candidate - other.pos))
        if distance > 2.0 * subject.radius:
            continue

        subject.direction *= -1.0
        candidate += subject.direction * step
        subject.pos = candidate.copy()
        other.direction *= -1.0
        events.append(CollisionEvent(t=t, a_id=i, b_id=j, pos=subject.pos.copy(), distance=distance))
        events.extend(_spread_infection(subject, other, i, j, sick_time, t=t))
    return events


def _spread_infection(
    a: Subject,
    b: Subject,
    a_id: int,
    b_id: int,
    sick_time: float,
    *,
    t: float,
) -> List[BaseEvent]:
    if not (a.is_sick or b.is_sick):
        return []
    events: List[BaseEvent] = []
    if a.infect(sick_time):
        events.append(InfectionEvent(t=t, subject_id=a_id, source_id=b_id))
    if b.infect(sick_time):
        events.append(InfectionEvent(t=t, subject_id=b_id, source_id=a_id))
    return events
