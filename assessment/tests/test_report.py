"""
Test guidance, profile insights and report rendering.
"""

from assessment.logic import AssessmentEngine, CategoryScore, score_assessment
from assessment.logic.constants import (
    ACADEMIC_SUBJECTS,
    APTITUDE_CATEGORIES,
    BIG_FIVE_TRAITS,
    CONTEXT_FACTORS,
    RIASEC_LETTERS,
)
from assessment.report import (
    RespondentDetails,
    analyze_profile,
    build_guidance,
    format_number,
    letter_grade,
    render_html,
    render_pdf,
    render_text,
)
from assessment.report.guidance import study_strategies
from assessment.report.insights import analyze_intelligences, analyze_learning, analyze_personality


def test_letter_grades():
    assert letter_grade(95) == "A+"
    assert letter_grade(85) == "A"
    assert letter_grade(75) == "B+"
    assert letter_grade(65) == "B"
    assert letter_grade(55) == "C+"
    assert letter_grade(45) == "C"
    assert letter_grade(35) == "D"
    assert letter_grade(34.99) == "F"


def test_format_number():
    assert format_number(3) == "3.00"
    assert format_number(12.5) == "12.50"
    assert format_number(float("nan")) == "0.00"
    assert format_number("12") == "0.00"
    assert format_number(None) == "0.00"


def test_personality_archetype():
    assert analyze_personality({}) == "Balanced"
    assert analyze_personality({"q1": "Strong presence and power", "q2": "Honest and smart", "q3": "Strong presence and power"}) == "Leader"


def test_intelligences_and_learning():
    answers = {"q5": "Mostly Agree", "q12": "Mostly Agree", "q1": "Mostly Disagree"}
    top = analyze_intelligences(answers)
    assert top[0] == "Logical-Mathematical"
    assert len(top) == 3
    assert analyze_intelligences(None) == []

    assert analyze_learning({"q1": "Read reviews", "q2": "Ask friends", "q3": "Make notes/diagrams"}) == "Visual"
    assert analyze_learning({"q1": "unknown"}) == "Mixed"


def test_field_suggestions_are_deduplicated_and_capped(sample_sections):
    sections = dict(sample_sections)
    sections["intelligences"] = {"q5": "Mostly Agree", "q8": "Mostly Agree", "q27": "Mostly Agree"}
    sections["learning"] = {"q1": "Just have a go"}
    sections["personality"] = {"q1": "Values and wisdom", "q2": "Values and wisdom", "q3": "Honest and smart"}
    payload = score_assessment(sections).to_payload()

    insights = analyze_profile(sections, payload["interestScores"])
    fields = [s.field for s in insights.field_suggestions]
    assert len(fields) == len(set(fields)) <= 5
    assert fields[0] == "Research and Analysis"


def test_regular_guidance(sample_sections):
    payload = score_assessment(sample_sections).to_payload()
    insights = analyze_profile(sample_sections, payload["interestScores"])
    guidance = build_guidance(payload, insights)

    assert len(guidance.study_strategies) <= 6
    assert guidance.alignment_notes[0].startswith("Top Recommended Stream: Science")
    assert guidance.insights is insights


def test_study_strategies_report_weak_subjects():
    strategies = study_strategies({"logical": 50}, {"socialScience": 50, "maths": 0, "science": 90}, "Visual")
    assert strategies[0] == "Use visual aids like diagrams, charts, and infographics"
    assert strategies[-1] == "Dedicate extra time to improve in: Social Science"
    assert len(strategies) == 5


def test_vhsc_guidance():
    payload = score_assessment({}, variant="vhsc").to_payload()
    guidance = build_guidance(payload)
    assert guidance.alignment_notes[0] == "Top Recommended Stream: Science with PCM/PCB"
    assert guidance.insights is None


def test_vhsc_guidance_omits_abroad_and_sector_notes_for_strong_scores():
    def strong(domain, labels):
        return CategoryScore(domain=domain, scores={label: 90 for label in labels})

    output = AssessmentEngine("vhsc").score_categories(
        strong("aptitude", APTITUDE_CATEGORIES),
        strong("interest", RIASEC_LETTERS),
        strong("academic", ACADEMIC_SUBJECTS),
        strong("personality", BIG_FIVE_TRAITS),
        strong("context", CONTEXT_FACTORS),
    )
    notes = build_guidance(output.to_payload()).alignment_notes
    assert len(notes) == 4
    assert not any("Abroad Study Options" in note or "High-Demand Sectors" in note for note in notes)
    assert not any("Consider improving" in note for note in notes)


def test_html_is_escaped(sample_sections):
    payload = score_assessment(sample_sections).to_payload()
    respondent = RespondentDetails(name="<script>alert(1)</script>", current_qualification="Grade 10")
    html = render_html(payload, respondent, build_guidance(payload))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "/15" in html


def test_pdf_and_text_render(sample_sections):
    payload = score_assessment(sample_sections).to_payload()
    respondent = RespondentDetails(name="Asha", current_qualification="Grade 10", contact_info="asha@example.com")
    guidance = build_guidance(payload, analyze_profile(sample_sections, payload["interestScores"]))

    pdf = render_pdf(payload, respondent, guidance)
    assert pdf.startswith(b"%PDF")

    text = render_text(payload, respondent, guidance, top_n=1)
    assert "1. Science" in text
    assert "2. Commerce" not in text
    assert "2. Arts/Humanities" not in text
