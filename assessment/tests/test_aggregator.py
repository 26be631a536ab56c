"""
Test the composite scorer.
"""

from assessment.logic.aggregator import compute_composite
from assessment.logic.contracts import CategoryScore


def _score(domain, **scores):
    return CategoryScore(domain=domain, scores=scores)


def test_composite_uses_fixed_label_sets():
    composite = compute_composite(
        _score("aptitude", numerical=100, verbal=0, spatial=0, mechanical=0, logical=0),
        _score("interest", R=6),
        _score("academic", maths=90, science=50),
        _score("personality", openness=100),
        _score("context", careerAwareness=90, resourceAccess=70, parentalSupport=50),
    )
    assert composite.aptitude == 20.0
    assert composite.interest == 1.0
    assert composite.academic == 28.0
    assert composite.personality == 20.0
    assert composite.context == 70.0
    assert composite.weighted_score == round(20 * 0.4 + 1 * 0.25 + 28 * 0.2 + 20 * 0.1 + 70 * 0.05, 2)


def test_composite_of_empty_scores_is_zero():
    empty = [CategoryScore(domain=d) for d in ("aptitude", "interest", "academic", "personality", "context")]
    composite = compute_composite(*empty)
    assert composite.weighted_score == 0
    assert set(composite.averages().values()) == {0}
