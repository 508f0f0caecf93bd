"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)

CATALOG_SOURCES = ("json", "http")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    # Catalog provider: "json" (local device file) | "http" (remote /recommend API)
    catalog_source: str = "json"
    catalog_api_url: str = "http://localhost:5000"
    catalog_timeout_seconds: float = 10.0
    catalog_json_path: Path = Path(__file__).parent.parent / "datasets" / "devices.json"
    # Max candidates the JSON provider returns for one request
    catalog_pool_limit: int = 20

    # Sampler
    batch_size: int = 5
    sampler_seed: Optional[int] = None

    # Sessions kept in memory before the oldest is evicted
    max_sessions: int = 1000

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent
        catalog_source = os.getenv("CATALOG_SOURCE", "").strip().lower() or "json"
        if catalog_source not in CATALOG_SOURCES:
            catalog_source = "json"

        def _path_env(key: str, default: Path) -> Path:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        seed = os.getenv("SAMPLER_SEED", "").strip()
        origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=origins or ["*"],
            catalog_source=catalog_source,
            catalog_api_url=os.getenv("CATALOG_API_URL", "http://localhost:5000").rstrip("/"),
            catalog_timeout_seconds=float(os.getenv("CATALOG_TIMEOUT_SECONDS", "10")),
            catalog_json_path=_path_env("CATALOG_JSON_PATH", base_dir / "datasets" / "devices.json"),
            catalog_pool_limit=int(os.getenv("CATALOG_POOL_LIMIT", "20")),
            batch_size=int(os.getenv("BATCH_SIZE", "5")),
            sampler_seed=int(seed) if seed else None,
            max_sessions=int(os.getenv("MAX_SESSIONS", "1000")),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.catalog_source == "json" and not self.catalog_json_path.exists():
            errors.append(f"Catalog JSON not found: {self.catalog_json_path}")

        if self.catalog_source == "http" and not self.catalog_api_url:
            errors.append("CATALOG_API_URL is required when CATALOG_SOURCE=http")

        if self.batch_size < 1:
            errors.append(f"BATCH_SIZE must be >= 1, got {self.batch_size}")

        if self.catalog_pool_limit < 1:
            errors.append(f"CATALOG_POOL_LIMIT must be >= 1, got {self.catalog_pool_limit}")

        if self.max_sessions < 1:
            errors.append(f"MAX_SESSIONS must be >= 1, got {self.max_sessions}")

        return len(errors) == 0, errors


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
