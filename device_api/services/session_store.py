"""
Session store: in-memory recommendation sessions.

Each session owns one RotatingSampler (pool + shown history) and remembers the
last request and catalog error. The store keeps at most max_sessions and drops
the oldest when full.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from rotation import Candidate, RecommendationRequest, RotatingSampler

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class RecommendationSession:
    """
    One user's recommendation session.

    The session lock is the only lock around a sampler: initialize, select_batch
    and every counter read happen under it, so a batch and the counters reported
    with it always come from the same state.
    """

    session_id: str
    sampler: RotatingSampler
    request: Optional[RecommendationRequest] = None
    error: Optional[str] = None
    created_at: str = field(default_factory=_now)
    updated_at: str = field(default_factory=_now)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def load_pool(
        self,
        request: RecommendationRequest,
        candidates: List[Candidate],
        error: Optional[str] = None,
    ) -> Tuple[List[Candidate], Dict[str, Any]]:
        """Replace the pool (clearing history); return the first batch and the state after it."""
        with self.lock:
            self.request = request
            self.error = error
            self.updated_at = _now()
            batch = self.sampler.initialize(candidates)
            return batch, self._snapshot()

    def next_batch(self) -> Tuple[List[Candidate], Dict[str, Any]]:
        """Draw the next batch; return it with the state after it. Empty pool gives []."""
        with self.lock:
            batch = self.sampler.select_batch()
            if batch:
                self.updated_at = _now()
            return batch, self._snapshot()

    def info(self) -> Dict[str, Any]:
        with self.lock:
            return self._snapshot()

    def _snapshot(self) -> Dict[str, Any]:
        sampler = self.sampler
        return {
            "session_id": self.session_id,
            "device_type": self.request.device_type.value if self.request else None,
            "usage_type": self.request.usage_type.value if self.request else None,
            "budget": self.request.budget if self.request else None,
            "pool_size": sampler.pool_size,
            "shown_count": sampler.shown_count,
            "remaining_count": sampler.remaining_count,
            "cycle": sampler.cycle,
            "batches_served": sampler.batches_served,
            "phase": sampler.phase.value,
            "error": self.error,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


class SessionStore:
    """Thread-safe in-memory session registry with oldest-first eviction."""

    def __init__(self, sampler_factory: Callable[[], RotatingSampler], max_sessions: int = 1000):
        self._sampler_factory = sampler_factory
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, RecommendationSession]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def create(self) -> RecommendationSession:
        session = RecommendationSession(
            session_id=str(uuid.uuid4())[:8],
            sampler=self._sampler_factory(),
        )
        with self._lock:
            while len(self._sessions) >= self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("[sessions] evicted oldest session %s", evicted)
            self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> Optional[RecommendationSession]:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()
