"""
Device Recommendation API: FastAPI app factory.

Use: uvicorn device_api.app:app
Or:  from device_api import app
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import ServerConfig, get_config
from .routes import register_routes
from .services import CatalogProvider
from .state import AppState, get_state, set_state

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(
    config: Optional[ServerConfig] = None,
    catalog_provider: Optional[CatalogProvider] = None,
) -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup checks.

    Passing config or catalog_provider installs a fresh AppState built from
    them; otherwise state is built lazily from the environment.
    """
    if config is not None or catalog_provider is not None:
        set_state(AppState(config or get_config(), catalog_provider=catalog_provider))
    active_config = config or get_config()
    configure_logging(active_config.log_level)

    app = FastAPI(
        title="Device Recommendation API",
        description="Rotating batches of laptop and phone recommendations",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=active_config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def _startup_logging():
        state = get_state()
        ok, errors = state.config.validate()
        for err in errors:
            logger.warning("[startup] config: %s", err)
        logger.info("[startup] Device Recommendation API starting (config valid=%s)", ok)
        logger.info("[startup] Catalog source: %s", state.config.catalog_source)
        logger.info("[startup] Batch size: %d", state.sampler_config.batch_size)

    return app


app = create_app()
