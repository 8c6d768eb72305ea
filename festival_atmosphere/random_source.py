from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    """
    The only randomness the simulator needs: an inclusive integer draw.
    random.Random satisfies this protocol.
    """

    def randint(self, a: int, b: int) -> int: ...


def make_random_source(seed: int | None = None) -> random.Random:
    # None seeds from the OS, like the process-wide generator.
    if seed is None:
        return random.Random()
    return random.Random(int(seed))
