"""Application state: config, catalog provider, and recommendation sessions."""

import logging
from typing import Optional

from rotation import RotatingSampler, SamplerConfig

from .config import ServerConfig, get_config
from .services import CatalogProvider, SessionStore, create_catalog_provider

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig, catalog_provider: Optional[CatalogProvider] = None):
        self.config = config
        self.sampler_config = SamplerConfig(
            batch_size=config.batch_size,
            seed=config.sampler_seed,
        )

        # Catalog: injected (tests) or built from config
        self.catalog_provider: CatalogProvider = (
            catalog_provider if catalog_provider is not None else create_catalog_provider(config)
        )
        logger.info("[startup] Catalog provider: %s", type(self.catalog_provider).__name__)

        # Session storage
        self.sessions = SessionStore(self.new_sampler, max_sessions=config.max_sessions)

    def new_sampler(self) -> RotatingSampler:
        """Sampler for a new session. A configured seed is shared, so sessions replay identically."""
        return RotatingSampler(self.sampler_config)


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (None resets it to be rebuilt from config)."""
    global _state
    _state = state
