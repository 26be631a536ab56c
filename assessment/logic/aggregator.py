"""
Composite Scorer

Combines the five category scores into per-domain averages and a single
weighted score.
"""

from .constants import (
    ACADEMIC_SUBJECTS,
    APTITUDE_CATEGORIES,
    BIG_FIVE_TRAITS,
    COMPOSITE_WEIGHTS,
    CONTEXT_FACTORS,
    RIASEC_LETTERS,
)
from .contracts import CategoryScore, CompositeScore


def compute_composite(
    aptitude: CategoryScore,
    interest: CategoryScore,
    academic: CategoryScore,
    personality: CategoryScore,
    context: CategoryScore,
) -> CompositeScore:
    """
    Compute domain averages and the weighted composite.

    Each domain average is the mean over that domain's fixed label set,
    rounded to 2 decimals. The weighted score is computed from the rounded
    averages and rounded again.

    Args:
        aptitude: Aptitude category score
        interest: RIASEC interest counts
        academic: Academic subject scores
        personality: Big Five trait percentages
        context: Contextual factor scores

    Returns:
        CompositeScore with averages and weighted_score
    """
    averages = {
        "aptitude": round(aptitude.mean(APTITUDE_CATEGORIES), 2),
        "interest": round(interest.mean(RIASEC_LETTERS), 2),
        "academic": round(academic.mean(ACADEMIC_SUBJECTS), 2),
        "personality": round(personality.mean(BIG_FIVE_TRAITS), 2),
        "context": round(context.mean(CONTEXT_FACTORS), 2),
    }

    weighted = sum(averages[domain] * weight for domain, weight in COMPOSITE_WEIGHTS.items())

    return CompositeScore(weighted_score=round(weighted, 2), **averages)
