"""Backing logic: catalog providers and the session store."""

from .catalog_provider import (
    DEFAULT_ERROR_MESSAGE,
    NO_DEVICES_MESSAGE,
    CatalogProvider,
    CatalogResult,
    HttpCatalogProvider,
    JsonCatalogProvider,
    StaticCatalogProvider,
    create_catalog_provider,
    select_devices,
)
from .session_store import RecommendationSession, SessionStore

__all__ = [
    "CatalogProvider",
    "CatalogResult",
    "DEFAULT_ERROR_MESSAGE",
    "HttpCatalogProvider",
    "JsonCatalogProvider",
    "NO_DEVICES_MESSAGE",
    "RecommendationSession",
    "SessionStore",
    "StaticCatalogProvider",
    "create_catalog_provider",
    "select_devices",
]
