"""
Data Contracts for the Stream Assessment Engine

Defines Pydantic models for category scores, composite scores and stream
recommendations. These contracts are the boundary between the scoring engine
and its collaborators (routes, storage, report rendering).
"""

from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .catalog import AbroadStudyOption, HighDemandSector, Stream
from .constants import ENGINE_VERSION
from .variants import SurveyVariant


# =============================================================================
# CATEGORY SCORES
# =============================================================================

class CategoryScore(BaseModel):
    """
    Labeled numeric scores for one assessment domain.

    Every label of the domain is present; labels that received no data hold 0.
    Aptitude scores also carry per-label correct/total answer counts.
    """
    domain: str
    scores: Dict[str, float] = Field(default_factory=dict)
    correct: Optional[Dict[str, int]] = None
    total: Optional[Dict[str, int]] = None

    def get(self, label: str) -> float:
        return self.scores.get(label, 0.0)

    def mean(self, labels: Optional[Iterable[str]] = None) -> float:
        """Arithmetic mean over the given labels (default: all labels). Missing labels count as 0."""
        keys = list(labels) if labels is not None else list(self.scores)
        if not keys:
            return 0.0
        return sum(self.get(key) for key in keys) / len(keys)

    def detail(self) -> Dict[str, Dict[str, float]]:
        """Score with correct/total counts per label (aptitude only)."""
        return {
            label: {
                "score": value,
                "correct": (self.correct or {}).get(label, 0),
                "total": (self.total or {}).get(label, 0),
            }
            for label, value in self.scores.items()
        }


class CompositeScore(BaseModel):
    """Domain averages plus the overall weighted score. Always derived, never stored alone."""
    aptitude: float = 0.0
    interest: float = 0.0
    academic: float = 0.0
    personality: float = 0.0
    context: float = 0.0
    weighted_score: float = 0.0

    def averages(self) -> Dict[str, float]:
        return {
            "aptitude": self.aptitude,
            "interest": self.interest,
            "academic": self.academic,
            "personality": self.personality,
            "context": self.context,
        }


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ScoredStream(BaseModel):
    """
    A catalog stream with its computed weight.
    Used between scoring and recommendation assembly.
    """
    stream: Stream
    catalog_position: int = 0
    academic_score: float = 0.0
    aptitude_score: float = 0.0
    interest_score: float = 0.0
    context_score: float = 0.0
    weight: float = 0.0

    def breakdown(self) -> Dict[str, float]:
        return {
            "academic": self.academic_score,
            "aptitude": self.aptitude_score,
            "interest": self.interest_score,
            "context": self.context_score,
        }


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class StreamRecommendation(BaseModel):
    """Single ranked stream recommendation with static annotations."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    rank: int = 0
    stream: str
    score: float
    reasoning: str = ""
    subjects: List[str] = Field(default_factory=list)
    career_paths: List[str] = Field(default_factory=list)
    breakdown: Dict[str, float] = Field(default_factory=dict)

    # Survey-variant dependent enrichment
    high_demand_sectors: List[HighDemandSector] = Field(default_factory=list)
    abroad_study_options: List[AbroadStudyOption] = Field(default_factory=list)


class AssessmentOutput(BaseModel):
    """
    Output contract for the assessment engine.
    Contains every category score, the composite and the ranked streams.
    """
    variant: SurveyVariant = SurveyVariant.REGULAR

    aptitude: CategoryScore
    interest: CategoryScore
    academic: CategoryScore
    personality: CategoryScore
    context: CategoryScore

    composite: CompositeScore = Field(default_factory=CompositeScore)
    stream_recommendations: List[StreamRecommendation] = Field(default_factory=list)

    # Warnings/Notes
    warnings: List[str] = Field(default_factory=list)
    engine_version: str = ENGINE_VERSION

    def top_streams(self, n: int) -> List[StreamRecommendation]:
        return self.stream_recommendations[:max(0, n)]

    def to_payload(self) -> Dict[str, Any]:
        """JSON-serializable plain dict with camelCase keys."""
        return {
            "variant": self.variant.value,
            "aptitudeScores": dict(self.aptitude.scores),
            "aptitudeDetail": self.aptitude.detail(),
            "interestScores": dict(self.interest.scores),
            "academicPerformance": dict(self.academic.scores),
            "personalityTraits": dict(self.personality.scores),
            "contextualInputs": dict(self.context.scores),
            "compositeScores": self.composite.averages(),
            "weightedScore": self.composite.weighted_score,
            "streamRecommendations": [
                rec.model_dump(by_alias=True, mode="json")
                for rec in self.stream_recommendations
            ],
            "warnings": list(self.warnings),
            "engineVersion": self.engine_version,
        }
