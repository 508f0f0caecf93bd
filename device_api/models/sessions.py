"""Session-related Pydantic models."""

from typing import List, Optional

from pydantic import BaseModel

from rotation import RecommendationRequest

from .common import CandidateCard


class CreateSessionRequest(RecommendationRequest):
    """Form selection: device_type, usage_type, budget (validated on construction)."""


class SessionResponse(BaseModel):
    session_id: str
    items: List[CandidateCard]
    pool_size: int
    shown_count: int
    remaining_count: int
    cycle: int
    phase: str
    device_type: Optional[str] = None
    error: Optional[str] = None


class SessionInfo(BaseModel):
    session_id: str
    device_type: Optional[str] = None
    usage_type: Optional[str] = None
    budget: Optional[float] = None
    pool_size: int
    shown_count: int
    remaining_count: int
    cycle: int
    batches_served: int
    phase: str
    error: Optional[str] = None
    created_at: str
    updated_at: str
