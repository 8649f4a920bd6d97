from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RandomGen:
    """Immutable handle on a deterministic random stream.

    Every draw returns the value together with the successor generator; the
    handle that produced a value must not be drawn from again. The state is a
    single 64-bit integer, so it serializes as plain JSON.
    """
    seed: int

    def randint(self, lo: int, hi: int) -> Tuple[int, 'RandomGen']:
        """Draws an integer uniformly from [lo, hi] and returns it with the next generator."""
        rng = random.Random(self.seed)
        value = rng.randint(lo, hi)
        return value, RandomGen(rng.getrandbits(64))


def mk_rng(seed: int) -> RandomGen:
    """Creates a generator from a user supplied seed."""
    return RandomGen(int(seed) & 0xFFFFFFFFFFFFFFFF)
