"""
HTML Report Renderer

Renders a scored assessment as a standalone HTML document. Every piece of
dynamic text is escaped.
"""

from html import escape
from typing import Any, Iterable, List, Mapping, Optional

from ..logic.constants import DEFAULT_TOP_N
from ..logic.variants import SurveyVariant, get_variant_config
from .contracts import Guidance, RespondentDetails
from .grading import format_number, humanize_label, letter_grade

REPORT_TITLE = "NextU Career Guidance Report"

_STYLE = """
body { font-family: Helvetica, Arial, sans-serif; color: #1f2937; margin: 32px; }
h1 { color: #1e3a8a; }
h2 { color: #1e40af; border-bottom: 1px solid #cbd5e1; padding-bottom: 4px; }
table { border-collapse: collapse; margin-bottom: 16px; }
th, td { border: 1px solid #cbd5e1; padding: 4px 10px; text-align: left; }
.stream { border: 1px solid #cbd5e1; border-radius: 6px; padding: 8px 14px; margin-bottom: 12px; }
"""


def _e(value: Any) -> str:
    return escape(str(value), quote=True)


def _list(items: Iterable[Any]) -> str:
    return "<ul>" + "".join(f"<li>{_e(item)}</li>" for item in items) + "</ul>"


def _score_table(title: str, scores: Mapping[str, Any], graded: bool = False, suffix: str = "") -> str:
    header = "<tr><th>Area</th><th>Score</th>" + ("<th>Grade</th>" if graded else "") + "</tr>"
    rows = []
    for label, value in scores.items():
        grade = f"<td>{_e(letter_grade(value))}</td>" if graded else ""
        rows.append(f"<tr><td>{_e(humanize_label(label))}</td><td>{_e(format_number(value))}{_e(suffix)}</td>{grade}</tr>")
    return f"<h2>{_e(title)}</h2><table>{header}{''.join(rows)}</table>"


def _interest_table(scores: Mapping[str, Any], scale: int) -> str:
    rows = "".join(
        f"<tr><td>{_e(letter)}</td><td>{_e(int(count))}/{_e(scale)}</td></tr>"
        for letter, count in scores.items()
    )
    return f"<h2>Interest Profile (RIASEC)</h2><table><tr><th>Type</th><th>Count</th></tr>{rows}</table>"


def _stream_block(rec: Mapping[str, Any]) -> str:
    parts = [
        f"<div class=\"stream\"><h3>{_e(rec.get('rank', ''))}. {_e(rec.get('stream', ''))} "
        f"({_e(format_number(rec.get('score')))}/100)</h3>",
        f"<p>{_e(rec.get('reasoning', ''))}</p>",
        f"<p><strong>Key subjects:</strong> {_e(', '.join(humanize_label(s) for s in rec.get('subjects', [])))}</p>",
    ]
    if rec.get("careerPaths"):
        parts.append("<p><strong>Career paths:</strong></p>" + _list(rec["careerPaths"]))
    if rec.get("highDemandSectors"):
        parts.append("<p><strong>High-demand sectors:</strong></p>" + _list(
            f"{sector.get('sector')} ({sector.get('growth')})" for sector in rec["highDemandSectors"]
        ))
    if rec.get("abroadStudyOptions"):
        parts.append("<p><strong>Study abroad:</strong></p>" + _list(
            f"{option.get('country')}: {', '.join(option.get('universities', []))}"
            for option in rec["abroadStudyOptions"]
        ))
    parts.append("</div>")
    return "".join(parts)


def render_html(
    payload: Mapping[str, Any],
    respondent: RespondentDetails,
    guidance: Guidance,
    top_n: Optional[int] = None,
) -> str:
    """
    Render a full HTML report.

    Args:
        payload: Output of AssessmentOutput.to_payload()
        respondent: Name, qualification and contact details
        guidance: Guidance sections for the payload
        top_n: Number of stream recommendations to show

    Returns:
        HTML document as a string
    """
    config = get_variant_config(payload.get("variant"))
    count = DEFAULT_TOP_N if top_n is None else top_n
    streams = (payload.get("streamRecommendations") or [])[:max(0, count)]
    composite = payload.get("compositeScores") or {}

    body: List[str] = [
        f"<h1>{_e(REPORT_TITLE)}</h1>",
        "<h2>Student Details</h2>",
        "<table>",
        f"<tr><th>Name</th><td>{_e(respondent.name)}</td></tr>",
        f"<tr><th>Current Qualification</th><td>{_e(respondent.current_qualification)}</td></tr>",
        f"<tr><th>Contact</th><td>{_e(respondent.contact_info)}</td></tr>",
        f"<tr><th>Assessment</th><td>{_e('VHSC' if config.variant == SurveyVariant.VHSC else 'Regular')}</td></tr>",
        "</table>",
        _score_table("Aptitude Scores", payload.get("aptitudeScores") or {}, graded=True),
        _score_table("Academic Performance", payload.get("academicPerformance") or {}, graded=True),
        _interest_table(payload.get("interestScores") or {}, config.riasec_scale),
        _score_table("Personality Traits", payload.get("personalityTraits") or {}, suffix="%"),
        _score_table("Contextual Factors", payload.get("contextualInputs") or {}),
        _score_table("Composite Scores", composite),
        f"<p><strong>Overall Weighted Score:</strong> {_e(format_number(payload.get('weightedScore')))}</p>",
        "<h2>Stream Recommendations</h2>",
    ]
    body.extend(_stream_block(rec) for rec in streams)

    insights = guidance.insights
    if insights is not None:
        body.append("<h2>Profile Insights</h2>")
        body.append(_list([
            f"Personality: {insights.personality_type}",
            f"Intelligences: {', '.join(insights.top_intelligences) or 'N/A'}",
            f"Learning Style: {insights.learning_style}",
        ]))
        if insights.field_suggestions:
            body.append("<h3>Suggested Career Fields</h3>")
            body.append(_list(
                f"{s.field}: {', '.join(s.professions)}" for s in insights.field_suggestions
            ))

    body.extend([
        "<h2>Alignment Notes</h2>", _list(guidance.alignment_notes),
        "<h2>Study Strategies</h2>", _list(guidance.study_strategies),
        "<h2>Skill-Building Roadmap</h2>", _list(guidance.skill_roadmap),
        "<h2>Immediate Next Actions</h2>", _list(guidance.immediate_actions),
    ])

    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        f"<title>{_e(REPORT_TITLE)} - {_e(respondent.name)}</title>"
        f"<style>{_STYLE}</style></head><body>"
        + "".join(body)
        + "</body></html>"
    )
