"""
Stream Ranker

Scores every catalog stream against a respondent's category scores, ranks
them, and attaches the static annotations that explain each recommendation.
"""

from typing import List, Mapping, Sequence, Tuple

from .catalog import ABROAD_STUDY_OPTIONS, AbroadStudyOption, Stream
from .constants import ABROAD_THRESHOLDS, ACADEMIC_SUBJECTS, CONTEXT_FACTORS
from .contracts import CategoryScore, ScoredStream, StreamRecommendation
from .variants import VariantConfig


def _sub_mean(score: CategoryScore, labels: Sequence[str]) -> float:
    return round(score.mean(labels), 2)


def score_stream(
    stream: Stream,
    categories: Mapping[str, CategoryScore],
    weights: Mapping[str, float],
    catalog_position: int = 0,
) -> ScoredStream:
    """
    Score one stream.

    Sub-means are taken over the stream's required subjects, aptitudes and
    interests (missing labels count as 0) plus all contextual factors.

    Args:
        stream: Catalog entry
        categories: Category scores keyed by domain name
        weights: Stream weights keyed academic/aptitude/interest/context
        catalog_position: Declaration order, kept for tie-breaking

    Returns:
        ScoredStream with the weight and its breakdown
    """
    academic = _sub_mean(categories["academic"], stream.required_subjects)
    aptitude = _sub_mean(categories["aptitude"], stream.required_aptitudes)
    interest = _sub_mean(categories["interest"], stream.required_interests)
    context = _sub_mean(categories["context"], CONTEXT_FACTORS)

    weight = (
        academic * weights["academic"]
        + aptitude * weights["aptitude"]
        + interest * weights["interest"]
        + context * weights["context"]
    )

    return ScoredStream(
        stream=stream,
        catalog_position=catalog_position,
        academic_score=academic,
        aptitude_score=aptitude,
        interest_score=interest,
        context_score=context,
        weight=weight,
    )


def score_catalog(
    catalog: Sequence[Stream],
    categories: Mapping[str, CategoryScore],
    weights: Mapping[str, float],
) -> List[ScoredStream]:
    return [
        score_stream(stream, categories, weights, catalog_position=position)
        for position, stream in enumerate(catalog)
    ]


def rank_streams(scored: Sequence[ScoredStream]) -> List[ScoredStream]:
    """
    Rank streams by weight (descending).

    The sort is stable, so equal weights keep catalog declaration order.
    """
    return sorted(scored, key=lambda x: x.weight, reverse=True)


def abroad_study_options(
    stream_name: str,
    academic: CategoryScore,
    personality: CategoryScore,
    context: CategoryScore,
) -> Tuple[AbroadStudyOption, ...]:
    """
    Return the study-abroad options a respondent qualifies for.

    Each stream with options has minimum requirements on the average academic
    score and on one personality trait or context factor. Streams without
    thresholds return nothing.
    """
    thresholds = ABROAD_THRESHOLDS.get(stream_name)
    if not thresholds:
        return ()

    observed = {
        "academic": academic.mean(ACADEMIC_SUBJECTS),
        "openness": personality.get("openness"),
        "resourceAccess": context.get("resourceAccess"),
    }
    for key, minimum in thresholds.items():
        if observed.get(key, 0.0) < minimum:
            return ()

    return ABROAD_STUDY_OPTIONS.get(stream_name, ())


def build_recommendations(
    ranked: Sequence[ScoredStream],
    categories: Mapping[str, CategoryScore],
    config: VariantConfig,
) -> List[StreamRecommendation]:
    """
    Turn ranked streams into recommendations.

    High-demand sectors and abroad options are attached only when the
    survey variant enables them.
    """
    recommendations = []
    for rank, scored in enumerate(ranked, start=1):
        stream = scored.stream

        sectors = list(stream.high_demand_sectors) if config.enrich_high_demand_sectors else []
        abroad = []
        if config.enrich_abroad_options:
            abroad = list(abroad_study_options(
                stream.name,
                categories["academic"],
                categories["personality"],
                categories["context"],
            ))

        recommendations.append(StreamRecommendation(
            rank=rank,
            stream=stream.name,
            score=round(scored.weight, 2),
            reasoning=stream.reasoning,
            subjects=list(stream.required_subjects),
            career_paths=list(stream.career_paths),
            breakdown=scored.breakdown(),
            high_demand_sectors=sectors,
            abroad_study_options=abroad,
        ))

    return recommendations


def top_recommendations(
    recommendations: Sequence[StreamRecommendation],
    n: int,
) -> List[StreamRecommendation]:
    """Truncate a ranked list for display."""
    return list(recommendations[:max(0, n)])
