"""
Random sources for the rotating sampler.

The sampler only ever asks for one thing: a uniform index in [0, upper).
NumpyRandomSource is the production source; ScriptedRandomSource replays a
fixed sequence so a selection can be reproduced exactly.
"""

from typing import Iterable, List, Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    """Draws one uniform index from a bounded range."""

    def draw_index(self, upper: int) -> int:
        """Return an int in [0, upper). upper must be >= 1."""
        ...


def _check_upper(upper: int) -> None:
    if upper < 1:
        raise ValueError(f"upper must be >= 1, got {upper}")


class NumpyRandomSource:
    """Uniform index source backed by numpy's default Generator."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def draw_index(self, upper: int) -> int:
        _check_upper(upper)
        return int(self._rng.integers(0, upper))


class ScriptedRandomSource:
    """
    Replays a fixed list of draws.

    Each scripted value is reduced modulo the requested bound, so the same
    script can drive pools of any size. Running out of values is an error.
    """

    def __init__(self, draws: Iterable[int]):
        self._draws: List[int] = list(draws)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._draws) - self._pos

    def draw_index(self, upper: int) -> int:
        _check_upper(upper)
        if self._pos >= len(self._draws):
            raise RuntimeError("ScriptedRandomSource exhausted")
        value = self._draws[self._pos]
        self._pos += 1
        return value % upper
