"""
PDF Report Renderer

Builds the downloadable PDF report with reportlab's platypus layout engine.
"""

import io
from html import escape
from typing import Any, Dict, List, Mapping, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..logic.constants import DEFAULT_TOP_N
from ..logic.variants import get_variant_config
from .contracts import Guidance, RespondentDetails
from .grading import format_number, humanize_label, letter_grade
from .html_renderer import REPORT_TITLE

ACCENT = colors.HexColor("#1e40af")
LINE = colors.HexColor("#cbd5e1")


def _styles() -> Dict[str, ParagraphStyle]:
    sample = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "title",
            parent=sample["Title"],
            fontName="Helvetica-Bold",
            fontSize=20,
            leading=24,
            textColor=ACCENT,
            spaceAfter=8,
        ),
        "section": ParagraphStyle(
            "section",
            parent=sample["Heading2"],
            fontName="Helvetica-Bold",
            fontSize=13,
            leading=16,
            textColor=ACCENT,
            spaceBefore=10,
            spaceAfter=4,
        ),
        "stream": ParagraphStyle(
            "stream",
            parent=sample["Heading3"],
            fontName="Helvetica-Bold",
            fontSize=11,
            leading=14,
            spaceBefore=6,
            spaceAfter=2,
        ),
        "body": ParagraphStyle(
            "body",
            parent=sample["Normal"],
            fontName="Helvetica",
            fontSize=10,
            leading=13,
            spaceAfter=3,
        ),
        "bullet": ParagraphStyle(
            "bullet",
            parent=sample["Normal"],
            fontName="Helvetica",
            fontSize=10,
            leading=13,
            leftIndent=14,
            bulletIndent=2,
            spaceAfter=2,
        ),
    }


def _table(rows: List[List[str]]) -> Table:
    table = Table(rows, hAlign="LEFT")
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), ACCENT),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("GRID", (0, 0), (-1, -1), 0.5, LINE),
        ("LEFTPADDING", (0, 0), (-1, -1), 6),
        ("RIGHTPADDING", (0, 0), (-1, -1), 6),
    ]))
    return table


def _score_rows(scores: Mapping[str, Any], graded: bool = False) -> List[List[str]]:
    rows = [["Area", "Score", "Grade"] if graded else ["Area", "Score"]]
    for label, value in scores.items():
        row = [humanize_label(label), format_number(value)]
        if graded:
            row.append(letter_grade(value))
        rows.append(row)
    return rows


def _bullets(items: List[str], style: ParagraphStyle) -> List[Paragraph]:
    return [Paragraph(escape(item), style, bulletText="•") for item in items]


def render_pdf(
    payload: Mapping[str, Any],
    respondent: RespondentDetails,
    guidance: Guidance,
    top_n: Optional[int] = None,
) -> bytes:
    """
    Render the PDF report.

    Args:
        payload: Output of AssessmentOutput.to_payload()
        respondent: Name, qualification and contact details
        guidance: Guidance sections for the payload
        top_n: Number of stream recommendations to include

    Returns:
        PDF document bytes
    """
    styles = _styles()
    config = get_variant_config(payload.get("variant"))
    count = DEFAULT_TOP_N if top_n is None else top_n

    output = io.BytesIO()
    doc = SimpleDocTemplate(
        output,
        pagesize=A4,
        leftMargin=44,
        rightMargin=44,
        topMargin=42,
        bottomMargin=34,
        title=f"{REPORT_TITLE} - {respondent.name}",
        author="NextU",
    )

    story: List[Any] = [
        Paragraph(escape(REPORT_TITLE), styles["title"]),
        _table([
            ["Student", "Details"],
            ["Name", respondent.name or "-"],
            ["Current Qualification", respondent.current_qualification or "-"],
            ["Contact", respondent.contact_info or "-"],
        ]),
        Spacer(1, 6),
    ]

    story.append(Paragraph("Aptitude Scores", styles["section"]))
    story.append(_table(_score_rows(payload.get("aptitudeScores") or {}, graded=True)))
    story.append(Paragraph("Academic Performance", styles["section"]))
    story.append(_table(_score_rows(payload.get("academicPerformance") or {}, graded=True)))

    story.append(Paragraph("Interest Profile (RIASEC)", styles["section"]))
    interest_rows = [["Type", "Count"]] + [
        [letter, f"{int(value)}/{config.riasec_scale}"]
        for letter, value in (payload.get("interestScores") or {}).items()
    ]
    story.append(_table(interest_rows))

    story.append(Paragraph("Personality Traits", styles["section"]))
    story.append(_table(_score_rows(payload.get("personalityTraits") or {})))
    story.append(Paragraph("Contextual Factors", styles["section"]))
    story.append(_table(_score_rows(payload.get("contextualInputs") or {})))
    story.append(Paragraph("Composite Scores", styles["section"]))
    story.append(_table(_score_rows(payload.get("compositeScores") or {})))
    story.append(Paragraph(
        f"Overall Weighted Score: <b>{escape(format_number(payload.get('weightedScore')))}</b>",
        styles["body"],
    ))

    story.append(Paragraph("Stream Recommendations", styles["section"]))
    for rec in (payload.get("streamRecommendations") or [])[:max(0, count)]:
        heading = f"{rec.get('rank', '')}. {rec.get('stream', '')} ({format_number(rec.get('score'))}/100)"
        story.append(Paragraph(escape(heading), styles["stream"]))
        story.append(Paragraph(escape(rec.get("reasoning", "")), styles["body"]))
        if rec.get("careerPaths"):
            story.append(Paragraph("Career paths: " + escape(", ".join(rec["careerPaths"])), styles["body"]))
        if rec.get("abroadStudyOptions"):
            countries = ", ".join(option.get("country", "") for option in rec["abroadStudyOptions"])
            story.append(Paragraph("Study abroad: " + escape(countries), styles["body"]))

    for title, items in (
        ("Alignment Notes", guidance.alignment_notes),
        ("Study Strategies", guidance.study_strategies),
        ("Skill-Building Roadmap", guidance.skill_roadmap),
        ("Immediate Next Actions", guidance.immediate_actions),
    ):
        story.append(Paragraph(title, styles["section"]))
        story.extend(_bullets(items, styles["bullet"]))

    doc.build(story)
    output.seek(0)
    return output.getvalue()
