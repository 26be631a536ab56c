"""
Test stream scoring, ranking and recommendation annotations.
"""

from assessment.logic.catalog import REGULAR_STREAMS, VHSC_STREAMS, get_stream
from assessment.logic.constants import STREAM_WEIGHTS
from assessment.logic.contracts import CategoryScore, ScoredStream
from assessment.logic.ranker import (
    abroad_study_options,
    build_recommendations,
    rank_streams,
    score_catalog,
    score_stream,
    top_recommendations,
)


def _categories(aptitude=None, interest=None, academic=None, personality=None, context=None):
    return {
        "aptitude": CategoryScore(domain="aptitude", scores=aptitude or {}),
        "interest": CategoryScore(domain="interest", scores=interest or {}),
        "academic": CategoryScore(domain="academic", scores=academic or {}),
        "personality": CategoryScore(domain="personality", scores=personality or {}),
        "context": CategoryScore(domain="context", scores=context or {}),
    }


def test_score_stream_weighting():
    science = get_stream(REGULAR_STREAMS, "Science")
    categories = _categories(
        aptitude={"numerical": 100, "logical": 50, "spatial": 0},
        interest={"I": 3, "R": 1},
        academic={"maths": 90, "science": 70},
        context={"careerAwareness": 90, "resourceAccess": 70, "parentalSupport": 50},
    )
    scored = score_stream(science, categories, STREAM_WEIGHTS)
    assert scored.academic_score == 80.0
    assert scored.aptitude_score == 50.0
    assert scored.interest_score == 2.0
    assert scored.context_score == 70.0
    assert scored.weight == 80 * 0.4 + 50 * 0.3 + 2 * 0.2 + 70 * 0.1


def test_rank_is_stable_for_equal_weights():
    crafted = [
        ScoredStream(stream=stream, catalog_position=i, weight=42.0)
        for i, stream in enumerate(VHSC_STREAMS)
    ]
    ranked = rank_streams(crafted)
    assert [s.stream.name for s in ranked] == [s.name for s in VHSC_STREAMS]


def test_rank_orders_by_weight():
    categories = _categories(
        academic={"english": 90, "socialScience": 90, "languages": 90},
        aptitude={"verbal": 100},
        interest={"A": 5, "S": 5},
    )
    ranked = rank_streams(score_catalog(REGULAR_STREAMS, categories, STREAM_WEIGHTS))
    assert ranked[0].stream.name == "Arts/Humanities"
    weights = [s.weight for s in ranked]
    assert weights == sorted(weights, reverse=True)


def test_abroad_gates():
    strong_academic = CategoryScore(domain="academic", scores={s: 90 for s in ("maths", "science", "english", "socialScience", "languages")})
    open_mind = CategoryScore(domain="personality", scores={"openness": 80})
    closed = CategoryScore(domain="personality", scores={"openness": 10})
    resources = CategoryScore(domain="context", scores={"resourceAccess": 70})
    no_resources = CategoryScore(domain="context", scores={"resourceAccess": 30})

    assert abroad_study_options("Science", strong_academic, open_mind, no_resources)
    assert not abroad_study_options("Science", strong_academic, closed, resources)
    assert abroad_study_options("Commerce", strong_academic, closed, resources)
    assert not abroad_study_options("Commerce", strong_academic, open_mind, no_resources)
    assert abroad_study_options("Arts/Humanities", strong_academic, open_mind, no_resources)
    assert abroad_study_options("Vocational/Technical", strong_academic, open_mind, resources) == ()


def test_vhsc_recommendations_have_no_enrichment(regular_config, vhsc_config):
    strong = {s: 90 for s in ("maths", "science", "english", "socialScience", "languages")}
    categories = _categories(
        academic=strong,
        personality={"openness": 100},
        context={"careerAwareness": 90, "resourceAccess": 90, "parentalSupport": 90},
    )

    regular = build_recommendations(
        rank_streams(score_catalog(regular_config.stream_catalog, categories, STREAM_WEIGHTS)),
        categories,
        regular_config,
    )
    assert all(rec.high_demand_sectors for rec in regular)
    assert all(rec.abroad_study_options for rec in regular)

    vhsc = build_recommendations(
        rank_streams(score_catalog(vhsc_config.stream_catalog, categories, STREAM_WEIGHTS)),
        categories,
        vhsc_config,
    )
    assert len(vhsc) == len(VHSC_STREAMS)
    assert all(not rec.high_demand_sectors and not rec.abroad_study_options for rec in vhsc)


def test_recommendation_fields_and_truncation(regular_config):
    categories = _categories()
    recs = build_recommendations(
        rank_streams(score_catalog(REGULAR_STREAMS, categories, STREAM_WEIGHTS)),
        categories,
        regular_config,
    )
    assert [r.rank for r in recs] == [1, 2, 3]
    assert recs[0].subjects == list(REGULAR_STREAMS[0].required_subjects)
    assert recs[0].career_paths
    assert len(top_recommendations(recs, 2)) == 2
    assert top_recommendations(recs, -1) == []
