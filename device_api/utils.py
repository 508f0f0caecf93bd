"""Pure helpers: candidate card formatting and session response building."""

from typing import Any, Dict, List

from rotation import Candidate

from .models import CandidateCard, SessionResponse

REFRESH_WITHOUT_POOL_MESSAGE = "No recommendations to refresh. Please click Recommend first."


def to_candidate_card(candidate: Candidate, position: int) -> CandidateCard:
    """Convert a Candidate to the card shown in a batch (position is 0-based within the batch)."""
    return CandidateCard(
        key=candidate.display_key(position),
        position=position,
        brand=candidate.brand,
        model=candidate.model,
        price=candidate.price,
        details=candidate.details(),
    )


def to_session_response(snapshot: Dict[str, Any], batch: List[Candidate]) -> SessionResponse:
    """Build the response from a batch and the session snapshot taken with it."""
    return SessionResponse(
        session_id=snapshot["session_id"],
        items=[to_candidate_card(c, i) for i, c in enumerate(batch)],
        pool_size=snapshot["pool_size"],
        shown_count=snapshot["shown_count"],
        remaining_count=snapshot["remaining_count"],
        cycle=snapshot["cycle"],
        phase=snapshot["phase"],
        device_type=snapshot["device_type"],
        error=snapshot["error"],
    )
