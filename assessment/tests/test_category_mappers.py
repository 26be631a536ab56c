"""
Test the per-domain category mappers.
"""

from assessment.logic.category_mappers import (
    context_keyword_score,
    interest_percentages,
    map_academic,
    map_aptitude,
    map_context,
    map_interest,
    map_personality,
)
from assessment.logic.constants import (
    ACADEMIC_SUBJECTS,
    APTITUDE_CATEGORIES,
    BIG_FIVE_TRAITS,
    CONTEXT_FACTORS,
    RIASEC_LETTERS,
)
from assessment.logic.normalizer import normalize_answers
from assessment.logic.question_banks import APTITUDE_BANK


def test_unrecognized_keys_give_all_zero_scores(regular_config):
    pairs = normalize_answers({"foo": "bar", "q999": "Yes"})
    expected = {
        map_aptitude: APTITUDE_CATEGORIES,
        map_academic: ACADEMIC_SUBJECTS,
        map_interest: RIASEC_LETTERS,
        map_personality: BIG_FIVE_TRAITS,
        map_context: CONTEXT_FACTORS,
    }
    for mapper, labels in expected.items():
        result = mapper(pairs, regular_config)
        assert result.scores == {label: 0 for label in labels}


def test_aptitude_all_correct_scores_100(regular_config, all_correct_aptitude):
    result = map_aptitude(normalize_answers(all_correct_aptitude), regular_config)
    assert all(score == 100.0 for score in result.scores.values())
    assert result.correct == {category: 5 for category in APTITUDE_CATEGORIES}
    assert result.total == {category: 5 for category in APTITUDE_CATEGORIES}


def test_aptitude_numerical_only(regular_config):
    answers = {}
    for index, question in enumerate(APTITUDE_BANK):
        if question.category == "numerical":
            answers[f"q{index + 1}"] = question.correct
        else:
            answers[f"q{index + 1}"] = next(o for o in question.options if o != question.correct)

    result = map_aptitude(normalize_answers(answers), regular_config)
    assert result.scores == {"numerical": 100, "verbal": 0, "spatial": 0, "mechanical": 0, "logical": 0}


def test_aptitude_partial_average_rounds_to_one_decimal(regular_config):
    # 1 of 3 numerical answers correct -> 33.3
    answers = {"q1": "30", "q2": "$3.00", "q3": "24"}
    result = map_aptitude(normalize_answers(answers), regular_config)
    assert result.scores["numerical"] == 33.3
    assert result.correct["numerical"] == 1
    assert result.total["numerical"] == 3


def test_aptitude_skips_invalid_options_and_unknown_indices(regular_config):
    answers = {"q1": "not an option", "q2": "$4.50", "q40": "anything"}
    result = map_aptitude(normalize_answers(answers), regular_config)
    assert result.scores["numerical"] == 100.0
    assert result.total["numerical"] == 1


def test_academic_bands(regular_config):
    result = map_academic(normalize_answers({"q1": "81-100%", "q2": "41-60%"}), regular_config)
    assert result.scores == {"maths": 90, "science": 50, "english": 0, "socialScience": 0, "languages": 0}


def test_academic_unknown_band_is_skipped(vhsc_config):
    result = map_academic(normalize_answers({"q1": "95%", "q3": "0-40%"}), vhsc_config)
    assert result.scores["maths"] == 0
    assert result.scores["english"] == 20


def test_interest_counts_only_yes(regular_config):
    answers = {"q1": "Yes", "q7": "Yes", "q2": "No", "q3": "Yes", "q8": "yes"}
    result = map_interest(normalize_answers(answers), regular_config)
    # q3 (index 2) is unmapped; "yes" is not an exact match
    assert result.scores["R"] == 2
    assert sum(result.scores.values()) == 2


def test_interest_total_bounded_by_answered_indices(regular_config):
    answers = {f"q{i}": "Yes" for i in range(1, 45)}
    result = map_interest(normalize_answers(answers), regular_config)
    assert sum(result.scores.values()) == len(regular_config.riasec_table)


def test_interest_percentages_use_variant_scale(regular_config, vhsc_config):
    counts = {"R": 3, "I": 0, "A": 0, "S": 0, "E": 0, "C": 0}
    assert interest_percentages(counts, regular_config.riasec_scale)["R"] == 20.0
    assert interest_percentages(counts, vhsc_config.riasec_scale)["R"] == 30.0


def test_personality_proportions(regular_config):
    answers = {
        "q1": "Values and wisdom",
        "q2": "Honest and smart",
        "q3": "Fun and dynamic",
        "q4": "Something unexpected",
    }
    result = map_personality(normalize_answers(answers), regular_config)
    assert result.scores["openness"] == 66.7
    assert result.scores["extraversion"] == 33.3
    assert result.scores["neuroticism"] == 0


def test_context_keyword_priority(regular_config):
    answers = {"q1": "Very aware", "q2": "Good access", "q3": "Somewhat supportive"}
    result = map_context(normalize_answers(answers), regular_config)
    assert result.scores == {"careerAwareness": 90, "resourceAccess": 70, "parentalSupport": 50}


def test_context_fallback_score():
    assert context_keyword_score("Not supportive") == 30
    assert context_keyword_score("Limited access") == 30
    assert context_keyword_score("Excellent access") == 90
