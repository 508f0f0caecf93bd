"""Pydantic request/response models for the API."""

from .common import CandidateCard
from .options import UsageOptionsResponse
from .sessions import CreateSessionRequest, SessionInfo, SessionResponse

__all__ = [
    "CandidateCard",
    "CreateSessionRequest",
    "SessionInfo",
    "SessionResponse",
    "UsageOptionsResponse",
]
