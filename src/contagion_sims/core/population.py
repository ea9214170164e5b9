# src/contagion_sims/core/population.py

from __future__ import annotations

import numpy as np

from contagion_sims.utils.random import rng
from .boundary import SquareArena
from .config import SimConfig
from .subject import Subject, create_subject


def random_direction(generator: np.random.Generator) -> np.ndarray:
    """
    Normalized pair of uniform [0, 1) draws.

    Both components are non-negative, so every subject initially heads into
    the first quadrant; walls and collisions spread the headings out later.
    """
    v = generator.uniform(0.0, 1.0, size=2)
    norm = float(np.linalg.norm(v))
    if norm == 0.0:
        return np.array([1.0, 0.0])
    return v / norm


def random_speed(arena: SquareArena, config: SimConfig, generator: np.random.Generator) -> float:
    speed_limit = arena.side / config.speed_scale
    return float(generator.uniform(speed_limit, speed_limit * config.minimal_speed))


def generate_subjects(
    config: SimConfig,
    arena: SquareArena,
    generator: np.random.Generator | None = None,
) -> list[Subject]:
    """
    Build a fresh population of exactly `config.n_subjects` subjects.

    The first `config.n_sick` subjects by index start sick. The list is then
    shuffled and the first `config.n_frozen` subjects are frozen, so the sick
    and frozen subsets are independent and may overlap.

    `generator` defaults to the "population" stream, which is entropy-seeded
    unless `seed_all` was called.
    """
    if generator is None:
        generator = rng("population")

    n_sick = config.n_sick
    subjects: list[Subject] = []
    for i in range(config.n_subjects):
        sick = i < n_sick
        subjects.append(create_subject(
            pos=arena.sample_position(generator),
            direction=random_direction(generator),
            speed=random_speed(arena, config, generator),
            radius=config.radius,
            sick=sick,
            sick_time=config.sick_time,
        ))

    order = generator.permutation(len(subjects))
    subjects = [subjects[k] for k in order]
    for subject in subjects[:config.n_frozen]:
        subject.frozen = True

    return subjects
