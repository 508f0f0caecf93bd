"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .options import router as options_router
from .root import router as root_router
from .sessions import router as sessions_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(options_router, prefix="/api", tags=["options"])
    app.include_router(sessions_router, prefix="/api/sessions", tags=["sessions"])
