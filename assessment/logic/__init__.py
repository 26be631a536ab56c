"""
Assessment Logic Module

Provides the deterministic scoring engine for stream recommendations.
"""

from .contracts import (
    AssessmentOutput,
    CategoryScore,
    CompositeScore,
    ScoredStream,
    StreamRecommendation,
)
from .engine import AssessmentEngine, score_assessment
from .variants import SurveyVariant, VariantConfig, get_variant_config, resolve_variant

__all__ = [
    # Main engine
    "AssessmentEngine",
    "score_assessment",

    # Contracts
    "AssessmentOutput",
    "CategoryScore",
    "CompositeScore",
    "ScoredStream",
    "StreamRecommendation",

    # Variants
    "SurveyVariant",
    "VariantConfig",
    "get_variant_config",
    "resolve_variant",
]
