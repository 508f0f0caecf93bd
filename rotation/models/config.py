"""
Sampler configuration: batch size and random seed.

SamplerConfig defaults are defined here. The server passes values read from
the environment; from_dict() merges a plain dict with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class SamplerConfig(BaseModel):
    """Configuration for the rotating sampler."""

    # Number of candidates shown per batch. Also the reset threshold: when fewer
    # than batch_size unshown candidates remain, the shown history is cleared.
    batch_size: int = Field(default=5, ge=1)

    # Seed for the default numpy random source. None = fresh entropy per sampler.
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "SamplerConfig":
        """Create config from dictionary (e.g. parsed env or JSON), ignoring unknown keys."""
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in config_dict.items() if k in allowed and v is not None}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = SamplerConfig()


def resolve_config(config: Optional["SamplerConfig"]) -> "SamplerConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
