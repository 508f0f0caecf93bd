"""
Device Recommendation API

Usage: uvicorn device_api:app --reload --port 8000
"""

__version__ = "1.0.0"

from .app import app, create_app  # noqa: E402
from .config import ServerConfig, get_config, reload_config  # noqa: E402
from .services import (  # noqa: E402
    CatalogResult,
    HttpCatalogProvider,
    JsonCatalogProvider,
    SessionStore,
    StaticCatalogProvider,
)

__all__ = [
    "app",
    "create_app",
    "ServerConfig",
    "get_config",
    "reload_config",
    "CatalogResult",
    "HttpCatalogProvider",
    "JsonCatalogProvider",
    "SessionStore",
    "StaticCatalogProvider",
]
