# src/contagion_sims/utils/random.py

from __future__ import annotations

from typing import Dict
import numpy as np

_master_seed: int | None = None
_streams: Dict[str, np.random.Generator] = {}


def seed_all(seed: int | None) -> None:
    """
    Set the master seed for every named stream.

    - If seed is None: streams are entropy-seeded, so each population differs.
    - Resets cached streams.
    """
    global _master_seed
    _master_seed = seed
    _streams.clear()


def rng(name: str = "population") -> np.random.Generator:
    """
    Return a named RNG stream (order-dependent draws within that stream).
    Used for population generation and the freeze shuffle.
    """
    if name not in _streams:
        if _master_seed is None:
            _streams[name] = np.random.default_rng()
        else:
            ss = np.random.SeedSequence([_master_seed, _stable_int(name)])
            _streams[name] = np.random.default_rng(ss)
    return _streams[name]


def _stable_int(name: str) -> int:
    # FNV-1a over the stream name, independent of PYTHONHASHSEED
    h = 2166136261
    for b in name.encode("utf-8"):
        h ^= b
        h = (h * 16777619) & 0xFFFFFFFF
    return h
