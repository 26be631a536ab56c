"""
Property-based tests for composite weighting and stream ranking.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from assessment.logic.aggregator import compute_composite
from assessment.logic.constants import (
    ACADEMIC_SUBJECTS,
    APTITUDE_CATEGORIES,
    BIG_FIVE_TRAITS,
    CONTEXT_FACTORS,
    RIASEC_LETTERS,
)
from assessment.logic.contracts import CategoryScore
from assessment.logic.engine import AssessmentEngine

score_values = st.floats(min_value=0, max_value=100, allow_nan=False, allow_infinity=False)


def _category(domain, labels):
    return st.fixed_dictionaries({label: score_values for label in labels}).map(
        lambda scores: CategoryScore(domain=domain, scores=scores)
    )


categories = st.tuples(
    _category("aptitude", APTITUDE_CATEGORIES),
    _category("interest", RIASEC_LETTERS),
    _category("academic", ACADEMIC_SUBJECTS),
    _category("personality", BIG_FIVE_TRAITS),
    _category("context", CONTEXT_FACTORS),
)


@given(categories)
@settings(max_examples=200)
def test_weighted_score_formula(scores):
    composite = compute_composite(*scores)
    expected = round(
        composite.aptitude * 0.4
        + composite.interest * 0.25
        + composite.academic * 0.2
        + composite.personality * 0.1
        + composite.context * 0.05,
        2,
    )
    assert composite.weighted_score == expected
    assert 0 <= composite.weighted_score <= 100


@given(categories, st.sampled_from(["regular", "vhsc"]))
def test_recommendations_sorted_non_increasing(scores, variant):
    output = AssessmentEngine(variant).score_categories(*scores)
    ranked = output.stream_recommendations
    assert all(a.score >= b.score for a, b in zip(ranked, ranked[1:]))
    assert [r.rank for r in ranked] == list(range(1, len(ranked) + 1))
