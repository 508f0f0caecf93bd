"""Data models for the rotation pipeline."""

from .candidate import Candidate, ensure_candidates
from .catalog import (
    INVALID_BUDGET_MESSAGE,
    USAGE_OPTIONS,
    DeviceCategory,
    RecommendationRequest,
    UsageProfile,
    usage_options_for,
)
from .config import DEFAULT_CONFIG, SamplerConfig, resolve_config

__all__ = [
    "Candidate",
    "DEFAULT_CONFIG",
    "DeviceCategory",
    "INVALID_BUDGET_MESSAGE",
    "RecommendationRequest",
    "SamplerConfig",
    "USAGE_OPTIONS",
    "UsageProfile",
    "ensure_candidates",
    "resolve_config",
    "usage_options_for",
]
