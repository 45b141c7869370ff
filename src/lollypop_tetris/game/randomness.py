from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    def pick_shape(self, count: int) -> int: ...

    def pick_color(self, count: int) -> int: ...


class StdRandomSource:
    """Uniform picks backed by ``random.Random``."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def pick_shape(self, count: int) -> int:
        return self.rng.randrange(count)

    def pick_color(self, count: int) -> int:
        return self.rng.randrange(count)
