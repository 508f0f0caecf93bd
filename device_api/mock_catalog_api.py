"""
Mock Catalog API: stand-in for the remote device recommendation backend.

Serves devices from the local device file (datasets/devices.json) over the same
contract the HTTP catalog provider consumes, so the main server can be tested
end to end with CATALOG_SOURCE=http.

Run:
  From repo root:
    python -m device_api.mock_catalog_api
  Or:
    uvicorn device_api.mock_catalog_api:app --reload --port 5000

  Then point the main server at it with CATALOG_SOURCE=http and CATALOG_API_URL=http://localhost:5000
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, List

from fastapi import FastAPI, Form
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from rotation import RecommendationRequest

from .services import select_devices

logger = logging.getLogger(__name__)

# Default: device file relative to repo root (parent of device_api/)
REPO_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_DATASET = REPO_ROOT / "datasets" / "devices.json"
POOL_LIMIT = 20


def _load_devices() -> List[Dict]:
    """Load devices from DEVICES_PATH env or default."""
    path = Path(os.environ.get("DEVICES_PATH", str(DEFAULT_DATASET)))
    if not path.exists():
        raise FileNotFoundError(f"Device file not found: {path}")
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("devices", [])
    return [d for d in data if isinstance(d, dict)]


# Loaded at startup
_devices: List[Dict] = []


app = FastAPI(
    title="Mock Catalog API",
    description="Device recommendation backend for testing (data from datasets/devices.json)",
    version="1.0.0",
)


@app.on_event("startup")
def startup():
    global _devices
    try:
        _devices = _load_devices()
        logger.info("Mock Catalog API: loaded %d devices", len(_devices))
    except FileNotFoundError as e:
        logger.warning("%s. Set DEVICES_PATH to a JSON list of devices.", e)


@app.get("/health")
def health():
    return {"status": "ok", "devices_loaded": len(_devices)}


@app.post("/recommend")
def recommend(
    device_type: str = Form(""),
    budget: str = Form(""),
    usage_type: str = Form(""),
):
    """
    Recommend devices for a form selection.

    400 {"error": ...} for an invalid selection, else {"recommendations": [...]}
    capped at POOL_LIMIT, most expensive first.
    """
    try:
        request = RecommendationRequest(
            device_type=device_type, usage_type=usage_type, budget=budget
        )
    except ValidationError as e:
        first = e.errors()[0]
        message = str(first.get("msg", "Invalid request")).removeprefix("Value error, ")
        return JSONResponse(status_code=400, content={"error": message})
    return {"recommendations": select_devices(_devices, request, POOL_LIMIT)}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "5000")))
