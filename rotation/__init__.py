"""
Device Recommendation Rotation: batch sampling over a ranked catalog pool

Single entry point for the rotation package:
- models/: Candidate, SamplerConfig, RecommendationRequest and the usage options
- random_source: RandomSource protocol, numpy-backed and scripted sources
- sampler: RotatingSampler (initialize / select_batch)
"""

from .models import (
    DEFAULT_CONFIG,
    USAGE_OPTIONS,
    Candidate,
    DeviceCategory,
    RecommendationRequest,
    SamplerConfig,
    UsageProfile,
    ensure_candidates,
    usage_options_for,
)
from .random_source import NumpyRandomSource, RandomSource, ScriptedRandomSource
from .sampler import RotatingSampler, SamplerPhase, draw_without_replacement

__all__ = [
    "Candidate",
    "DEFAULT_CONFIG",
    "DeviceCategory",
    "NumpyRandomSource",
    "RandomSource",
    "RecommendationRequest",
    "RotatingSampler",
    "SamplerConfig",
    "SamplerPhase",
    "ScriptedRandomSource",
    "USAGE_OPTIONS",
    "UsageProfile",
    "draw_without_replacement",
    "ensure_candidates",
    "usage_options_for",
]
