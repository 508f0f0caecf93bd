"""
Rotating-subset sampler: serves a candidate pool in random batches without repeats.

One sampler owns one pool and its shown history:
- initialize(pool): replace the pool, clear the history, draw the first batch
- select_batch(): draw the next batch of previously unshown candidates

When fewer than batch_size unshown candidates remain, the whole history is
cleared before drawing (a cycle reset). Leftover unshown candidates get no
priority in the next cycle.
"""

import logging
from enum import Enum
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from .models.config import SamplerConfig, resolve_config
from .random_source import NumpyRandomSource, RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SamplerPhase(str, Enum):
    FRESH = "fresh"
    PARTIAL = "partial"


def draw_without_replacement(
    available: List[int],
    count: int,
    source: RandomSource,
) -> List[int]:
    """
    Pop up to count indices from available, each uniformly among those left.

    Mutates available. Returned indices are in draw order.
    """
    picked: List[int] = []
    while len(picked) < count and available:
        k = source.draw_index(len(available))
        picked.append(available.pop(k))
    return picked


class RotatingSampler(Generic[T]):
    """
    Batch sampler over a fixed pool with a no-repeat-until-exhaustion history.

    Candidates are opaque: the sampler never looks inside them. A sampler is
    not thread-safe; callers that share one across threads serialize access
    (the API does this with the per-session lock).
    """

    def __init__(
        self,
        config: Optional[SamplerConfig] = None,
        random_source: Optional[RandomSource] = None,
    ):
        self.config = resolve_config(config)
        self._source: RandomSource = (
            random_source if random_source is not None else NumpyRandomSource(self.config.seed)
        )
        self._pool: Tuple[T, ...] = ()
        self._shown: set = set()
        self._cycle = 0
        self._batches_served = 0
        self._last_batch: Tuple[int, ...] = ()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def batch_size(self) -> int:
        return self.config.batch_size

    @property
    def pool(self) -> Tuple[T, ...]:
        return self._pool

    @property
    def shown(self) -> frozenset:
        return frozenset(self._shown)

    @property
    def pool_size(self) -> int:
        return len(self._pool)

    @property
    def shown_count(self) -> int:
        return len(self._shown)

    @property
    def remaining_count(self) -> int:
        return len(self._pool) - len(self._shown)

    @property
    def cycle(self) -> int:
        """Number of history resets since the last initialize."""
        return self._cycle

    @property
    def batches_served(self) -> int:
        return self._batches_served

    @property
    def last_batch_indices(self) -> Tuple[int, ...]:
        return self._last_batch

    @property
    def phase(self) -> SamplerPhase:
        return SamplerPhase.PARTIAL if self._shown else SamplerPhase.FRESH

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def initialize(self, new_pool: Optional[Sequence[T]]) -> List[T]:
        """Replace the pool, clear all history and return the first batch."""
        self._pool = tuple(new_pool or ())
        self._shown = set()
        self._cycle = 0
        self._batches_served = 0
        self._last_batch = ()
        logger.debug("[sampler] initialized pool_size=%d", len(self._pool))
        return self.select_batch()

    def select_batch(self) -> List[T]:
        """
        Draw the next batch of up to batch_size unshown candidates.

        Empty pool: returns [] and leaves the history untouched. If fewer than
        batch_size unshown candidates remain, the history is cleared first and
        the draw is made from the whole pool.
        """
        if not self._pool:
            return []
        available = [i for i in range(len(self._pool)) if i not in self._shown]
        if len(available) < self.batch_size:
            # Pools smaller than a batch land here on every draw; only a
            # non-empty history counts as a new cycle.
            if self._shown:
                self._cycle += 1
                logger.debug(
                    "[sampler] cycle reset: %d unshown of %d (< %d)",
                    len(available), len(self._pool), self.batch_size,
                )
            self._shown = set()
            available = list(range(len(self._pool)))
        picked = draw_without_replacement(
            available, min(self.batch_size, len(available)), self._source
        )
        self._shown.update(picked)
        self._batches_served += 1
        self._last_batch = tuple(picked)
        return [self._pool[i] for i in picked]
