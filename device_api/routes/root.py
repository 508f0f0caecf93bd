"""Root and health endpoints."""

from fastapi import APIRouter

from .. import __version__
from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    return {
        "name": "Device Recommendation API",
        "version": __version__,
        "catalog": type(state.catalog_provider).__name__,
        "batch_size": state.sampler_config.batch_size,
        "endpoints": {
            "options": ["/api/options"],
            "recommendations": [
                "/api/sessions/create",
                "/api/sessions/{id}/recommend",
                "/api/sessions/{id}/next",
            ],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {
        "status": "healthy",
        "catalog_source": state.config.catalog_source,
        "sessions": len(state.sessions),
    }
