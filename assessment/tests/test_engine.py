"""
Test the full assessment pipeline end to end.
"""

import json

from assessment.logic import AssessmentEngine, SurveyVariant, score_assessment
from assessment.logic.catalog import REGULAR_STREAMS, VHSC_STREAMS
from assessment.logic.question_banks import APTITUDE_BANK


def test_numerical_only_aptitude():
    answers = {}
    for index, question in enumerate(APTITUDE_BANK):
        wrong = next(o for o in question.options if o != question.correct)
        answers[f"q{index + 1}"] = question.correct if question.category == "numerical" else wrong

    payload = score_assessment({"aptitude": answers}).to_payload()
    assert payload["aptitudeScores"] == {"numerical": 100, "verbal": 0, "spatial": 0, "mechanical": 0, "logical": 0}
    assert payload["aptitudeDetail"]["numerical"] == {"score": 100, "correct": 5, "total": 5}


def test_academic_scenario():
    payload = score_assessment({"academic": {"q1": "81-100%", "q2": "41-60%"}}).to_payload()
    assert payload["academicPerformance"] == {
        "maths": 90, "science": 50, "english": 0, "socialScience": 0, "languages": 0,
    }


def test_empty_input_ranks_catalog_in_order():
    for variant, catalog in ((SurveyVariant.REGULAR, REGULAR_STREAMS), (SurveyVariant.VHSC, VHSC_STREAMS)):
        payload = AssessmentEngine(variant).score_sections({}).to_payload()
        assert payload["weightedScore"] == 0
        assert [r["stream"] for r in payload["streamRecommendations"]] == [s.name for s in catalog]
        assert all(r["score"] == 0 for r in payload["streamRecommendations"])
        assert payload["warnings"] == ["No responses found for any section"]


def test_context_scenario():
    sections = {"context": {"q1": "Very aware", "q2": "Good access", "q3": "Somewhat supportive"}}
    payload = score_assessment(sections).to_payload()
    assert payload["contextualInputs"] == {"careerAwareness": 90, "resourceAccess": 70, "parentalSupport": 50}


def test_pipeline_is_idempotent(sample_sections):
    first = json.dumps(score_assessment(sample_sections).to_payload(), sort_keys=True)
    second = json.dumps(score_assessment(sample_sections).to_payload(), sort_keys=True)
    assert first == second


def test_payload_shape_and_top_stream(sample_sections):
    payload = score_assessment(sample_sections).to_payload()
    assert set(payload) == {
        "variant", "aptitudeScores", "aptitudeDetail", "interestScores", "academicPerformance",
        "personalityTraits", "contextualInputs", "compositeScores", "weightedScore",
        "streamRecommendations", "warnings", "engineVersion",
    }
    assert payload["variant"] == "regular"
    assert payload["warnings"] == []

    top = payload["streamRecommendations"][0]
    assert top["stream"] == "Science"
    assert {"stream", "score", "reasoning", "subjects", "careerPaths", "highDemandSectors", "abroadStudyOptions"} <= set(top)
    assert top["highDemandSectors"][0]["careerPaths"]


def test_missing_sections_are_reported(sample_sections):
    sections = dict(sample_sections)
    del sections["career"]
    payload = score_assessment(sections).to_payload()
    assert payload["interestScores"] == {letter: 0 for letter in "RIASEC"}
    assert len(payload["warnings"]) == 1
    assert "interest" in payload["warnings"][0]


def test_vhsc_prefixed_sections_take_precedence():
    sections = {
        "vhsc-context": {"q1": "Very aware"},
        "context": {"q1": "Not aware at all"},
    }
    output = AssessmentEngine("vhsc").score_sections(sections)
    assert output.variant == SurveyVariant.VHSC
    assert output.context.get("careerAwareness") == 90

    regular = AssessmentEngine("regular").score_sections(sections)
    assert regular.context.get("careerAwareness") == 30


def test_unknown_variant_falls_back_to_regular():
    assert AssessmentEngine("nonsense").variant == SurveyVariant.REGULAR
    assert AssessmentEngine(None).variant == SurveyVariant.REGULAR


def test_score_responses_uses_latest_row_per_section():
    rows = [
        {"section": "context", "answers": {"q1": "Not aware at all"}},
        {"section": "context", "answers": {"q1": "Very aware"}},
    ]
    output = AssessmentEngine().score_responses(rows)
    assert output.context.get("careerAwareness") == 90


def test_score_categories_matches_score_sections(sample_sections):
    engine = AssessmentEngine()
    full = engine.score_sections(sample_sections)
    snapshot = engine.score_categories(full.aptitude, full.interest, full.academic, full.personality, full.context)
    assert snapshot.composite == full.composite
    assert [r.stream for r in snapshot.stream_recommendations] == [r.stream for r in full.stream_recommendations]


def test_unparseable_keys_do_not_break_scoring():
    output = score_assessment({"career": {"q--1": "Yes", "q²": "Yes", "q1": "Yes"}})
    assert output.interest.get("R") == 1
    assert output.warnings
