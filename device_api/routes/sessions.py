"""Session and recommendation endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from rotation import ensure_candidates

from ..models import CreateSessionRequest, SessionInfo, SessionResponse
from ..services import RecommendationSession
from ..state import get_state
from ..utils import REFRESH_WITHOUT_POOL_MESSAGE, to_session_response

logger = logging.getLogger(__name__)

router = APIRouter()


def _log_sessions(msg: str, *args) -> None:
    logger.info("[sessions] " + msg, *args)


def _get_session_or_404(session_id: str) -> RecommendationSession:
    session = get_state().sessions.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _fetch_and_load(session: RecommendationSession, request: CreateSessionRequest) -> SessionResponse:
    """Fetch the catalog for request and reinitialize the session's sampler with it."""
    state = get_state()
    result = state.catalog_provider.fetch(request)
    candidates = ensure_candidates(result.candidates) if result.ok else []
    if not result.ok:
        _log_sessions("catalog failure for %s: %s", session.session_id, result.error)
    batch, snapshot = session.load_pool(request, candidates, error=result.error)
    _log_sessions(
        "session %s loaded: pool=%d batch=%d", session.session_id, len(candidates), len(batch)
    )
    return to_session_response(snapshot, batch)


@router.post("/create", response_model=SessionResponse)
def create_session(request: CreateSessionRequest):
    """Create a session, fetch the catalog for the form selection and return the first batch."""
    session = get_state().sessions.create()
    _log_sessions(
        "create_session %s: %s/%s budget=%s",
        session.session_id, request.device_type.value, request.usage_type.value, request.budget,
    )
    return _fetch_and_load(session, request)


@router.get("/{session_id}", response_model=SessionInfo)
def get_session_info(session_id: str):
    """Get session info."""
    return SessionInfo(**_get_session_or_404(session_id).info())


@router.post("/{session_id}/recommend", response_model=SessionResponse)
def recommend(session_id: str, request: CreateSessionRequest):
    """Re-fetch with a new form selection; the old pool and history are discarded."""
    session = _get_session_or_404(session_id)
    return _fetch_and_load(session, request)


@router.post("/{session_id}/next", response_model=SessionResponse)
def load_more(session_id: str):
    """Show the next batch of candidates from the session's pool."""
    session = _get_session_or_404(session_id)
    batch, snapshot = session.next_batch()
    if snapshot["pool_size"] == 0:
        raise HTTPException(status_code=400, detail=REFRESH_WITHOUT_POOL_MESSAGE)
    return to_session_response(snapshot, batch)


@router.delete("/{session_id}")
def delete_session(session_id: str):
    """Drop a session."""
    if not get_state().sessions.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"status": "deleted", "session_id": session_id}
