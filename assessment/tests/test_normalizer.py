"""
Test answer normalization.
"""

from assessment.logic.normalizer import (
    normalize_answers,
    organize_sections,
    parse_question_key,
    to_answer_map,
)


def test_parse_question_key_variants():
    assert parse_question_key("q1") == 0
    assert parse_question_key("Q12") == 11
    assert parse_question_key(" 3 ") == 2
    assert parse_question_key(5) == 4


def test_parse_question_key_rejects_malformed():
    assert parse_question_key("qx") is None
    assert parse_question_key("q0") is None
    assert parse_question_key("-2") is None
    assert parse_question_key("1.5") is None
    assert parse_question_key("") is None
    assert parse_question_key(True) is None
    assert parse_question_key("q--1") is None
    assert parse_question_key("q+1") is None
    assert parse_question_key("q\u00b2") is None
    assert parse_question_key("q" + "9" * 5000) is None


def test_normalize_mapping_keeps_input_order():
    pairs = normalize_answers({"q3": "c", "q1": "a", "bad": "x", "q2": None, "q4": ""})
    assert pairs == [(2, "c"), (0, "a")]


def test_normalize_list_uses_positions():
    assert normalize_answers(["a", None, "c"]) == [(0, "a"), (2, "c")]


def test_normalize_converts_scalars_and_handles_none():
    assert normalize_answers({"q1": 30}) == [(0, "30")]
    assert normalize_answers(None) == []
    assert normalize_answers("not answers") == []


def test_to_answer_map_last_write_wins():
    assert to_answer_map([(0, "a"), (1, "b"), (0, "c")]) == {0: "c", 1: "b"}


def test_organize_sections_later_rows_win():
    class Row:
        def __init__(self, section, answers):
            self.section = section
            self.answers = answers

    rows = [
        {"section": "aptitude", "answers": {"q1": "20"}},
        Row("career", {"q1": "Yes"}),
        {"section": "aptitude", "answers": {"q1": "30"}},
        {"section": "", "answers": {"q1": "ignored"}},
    ]
    assert organize_sections(rows) == {"aptitude": {"q1": "30"}, "career": {"q1": "Yes"}}


def test_normalize_skips_keys_int_cannot_parse():
    pairs = normalize_answers({"q--1": "Yes", "q²": "Yes", "q" + "1" * 5000: "Yes", "q1": "Yes"})
    assert pairs == [(0, "Yes")]
