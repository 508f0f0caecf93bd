"""
Catalog Provider abstraction.

Supplies the ranked candidate list for one recommendation request.
Implementations: JSON device file (local), HTTP /recommend API (remote), static list (tests/demo).

Providers never raise for catalog or transport problems; they return a
CatalogResult whose error message is meant for the user.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union

import requests

from rotation.models import RecommendationRequest
from rotation.models.candidate import parse_price

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Error fetching recommendations"
NO_DEVICES_MESSAGE = "No devices found."


@dataclass
class CatalogResult:
    """Outcome of one catalog fetch: candidate records, or a human-readable error."""

    ok: bool
    candidates: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def success(cls, candidates: Optional[List[Dict[str, Any]]]) -> "CatalogResult":
        return cls(ok=True, candidates=list(candidates or []))

    @classmethod
    def failure(cls, message: str) -> "CatalogResult":
        return cls(ok=False, candidates=[], error=message)


class CatalogProvider(Protocol):
    """Protocol for catalog access. Implement for local files or a remote API."""

    def fetch(self, request: RecommendationRequest) -> CatalogResult:
        """Return the ranked candidates for a request, or a failure."""
        ...


class StaticCatalogProvider:
    """Returns the same candidate list for every request."""

    def __init__(self, candidates: List[Dict[str, Any]]):
        self._candidates = list(candidates)

    def fetch(self, request: RecommendationRequest) -> CatalogResult:
        return CatalogResult.success(self._candidates)


def _device_matches(device: Dict[str, Any], request: RecommendationRequest) -> bool:
    """True if device is in the category, within budget and suited to the usage."""
    if str(device.get("category", "")).lower() != request.device_type.value:
        return False
    price = parse_price(device.get("Price"))
    if price is None or price > request.budget:
        return False
    usage = device.get("usage")
    if isinstance(usage, list) and usage:
        return request.usage_type.value in {str(u).lower() for u in usage}
    return True


def select_devices(
    devices: List[Dict[str, Any]],
    request: RecommendationRequest,
    limit: int,
) -> List[Dict[str, Any]]:
    """Devices matching the request, most expensive first, capped at limit."""
    matches = [d for d in devices if isinstance(d, dict) and _device_matches(d, request)]
    matches.sort(key=lambda d: parse_price(d["Price"]), reverse=True)
    return matches[:limit]


class JsonCatalogProvider:
    """
    Catalog provider backed by a JSON device file (list of device dicts).
    Used when CATALOG_SOURCE=json; path comes from CATALOG_JSON_PATH.
    """

    def __init__(self, path: Union[Path, str], pool_limit: int = 20):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Catalog JSON not found: {self._path}")
        with open(self._path) as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get("devices", [])
        self._devices: List[Dict[str, Any]] = [d for d in data if isinstance(d, dict)]
        self.pool_limit = pool_limit

    @property
    def devices(self) -> List[Dict[str, Any]]:
        return self._devices

    def fetch(self, request: RecommendationRequest) -> CatalogResult:
        out = select_devices(self._devices, request, self.pool_limit)
        logger.info(
            "[catalog] json %s/%s budget=%s -> %d devices",
            request.device_type.value, request.usage_type.value, request.budget, len(out),
        )
        return CatalogResult.success(out)


class HttpCatalogProvider:
    """
    Catalog provider backed by a remote recommendation API.

    POSTs form fields device_type, budget, usage_type to <base_url>/recommend and
    expects {"recommendations": [...]} or, on error, {"error": "..."}.
    """

    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch(self, request: RecommendationRequest) -> CatalogResult:
        url = f"{self.base_url}/recommend"
        try:
            response = requests.post(url, data=request.form_fields(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("[catalog] request to %s failed: %s", url, e)
            return CatalogResult.failure(NO_DEVICES_MESSAGE)

        if not response.ok:
            message = DEFAULT_ERROR_MESSAGE
            try:
                body = response.json()
                if isinstance(body, dict) and body.get("error"):
                    message = str(body["error"])
            except ValueError:
                pass
            logger.warning("[catalog] %s returned %s: %s", url, response.status_code, message)
            return CatalogResult.failure(message)

        try:
            body = response.json()
        except ValueError:
            logger.warning("[catalog] %s returned a non-JSON body", url)
            return CatalogResult.failure(NO_DEVICES_MESSAGE)

        recs = body.get("recommendations") if isinstance(body, dict) else None
        if not isinstance(recs, list):
            recs = []
        logger.info("[catalog] http %s -> %d devices", url, len(recs))
        return CatalogResult.success(recs)


def create_catalog_provider(config) -> CatalogProvider:
    """Build the provider selected by config.catalog_source."""
    if config.catalog_source == "http":
        return HttpCatalogProvider(config.catalog_api_url, timeout=config.catalog_timeout_seconds)
    return JsonCatalogProvider(config.catalog_json_path, pool_limit=config.catalog_pool_limit)
