#!/usr/bin/env python3
"""
Device Recommendation API Server: entrypoint for uvicorn device_api.server:app.

For uvicorn device_api:app use device_api/__init__.py (exposes app from device_api.app).
"""

from .app import app

if __name__ == "__main__":
    import uvicorn

    from .config import get_config

    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port)
