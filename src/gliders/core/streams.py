"""Independent pseudo-random streams derived from one user-facing seed.

Every consumer of randomness (planet placement, glider sampling, orbit sense
choice, search sampling) gets its own stream keyed by a :class:`StreamRole`,
so drawing more numbers in one place never shifts another.
"""
from __future__ import annotations

from enum import IntEnum

import numpy as np


class StreamRole(IntEnum):
    PLANETS = 0
    TRAJECTORY_SAMPLING = 1
    ORBIT_SENSE = 2
    SEARCH_SAMPLING = 3


BIT_GENERATORS = {
    "pcg64": np.random.PCG64,
    "mt19937": np.random.MT19937,
    "philox": np.random.Philox,
    "sfc64": np.random.SFC64,
}

_SEED_MASK = (1 << 64) - 1


def make_rng(seed: int, role: StreamRole, engine: str = "pcg64") -> np.random.Generator:
    """Return the generator for ``role`` under the top-level ``seed``."""

    try:
        bit_generator = BIT_GENERATORS[engine.lower()]
    except KeyError:
        raise ValueError(
            f"unknown random engine {engine!r}; expected one of {sorted(BIT_GENERATORS)}"
        ) from None
    sequence = np.random.SeedSequence(int(seed) & _SEED_MASK, spawn_key=(int(role),))
    return np.random.Generator(bit_generator(sequence))


def coin(rng: np.random.Generator) -> bool:
    return bool(rng.random() < 0.5)


__all__ = ["BIT_GENERATORS", "StreamRole", "coin", "make_rng"]
