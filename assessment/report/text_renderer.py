"""
Plain-Text Report Renderer
"""

from typing import Any, List, Mapping, Optional

from ..logic.constants import DEFAULT_TOP_N
from .contracts import Guidance, RespondentDetails
from .grading import format_number
from .html_renderer import REPORT_TITLE


def render_text(
    payload: Mapping[str, Any],
    respondent: RespondentDetails,
    guidance: Guidance,
    top_n: Optional[int] = None,
) -> str:
    """Render the elaborated report as plain text, one item per line."""
    count = DEFAULT_TOP_N if top_n is None else top_n
    interest = payload.get("interestScores") or {}

    lines: List[str] = [REPORT_TITLE, ""]
    lines.append("Profile Summary")
    lines.append(f"- Name: {respondent.name}")
    lines.append(f"- RIASEC Scores: {' | '.join(f'{k}:{int(v)}' for k, v in interest.items())}")
    lines.append(f"- Weighted Score: {format_number(payload.get('weightedScore'))}")

    insights = guidance.insights
    if insights is not None:
        lines.append(f"- Personality: {insights.personality_type}")
        lines.append(f"- Intelligences: {', '.join(insights.top_intelligences)}")
        lines.append(f"- Learning Style: {insights.learning_style}")
    lines.append("")

    lines.append("Stream Recommendations")
    for rec in (payload.get("streamRecommendations") or [])[:max(0, count)]:
        lines.append(f"{rec.get('rank')}. {rec.get('stream')} ({format_number(rec.get('score'))})")
        lines.append(f"   Why: {rec.get('reasoning', '')}")
        lines.append(f"   Careers: {', '.join(rec.get('careerPaths', []))}")

    if insights is not None and insights.field_suggestions:
        lines.append("")
        lines.append("Suggested Career Fields")
        for idx, suggestion in enumerate(insights.field_suggestions, start=1):
            lines.append(f"{idx}. {suggestion.field}")
            lines.append(f"   Why: {suggestion.reason}")
            lines.append(f"   Roles: {', '.join(suggestion.professions)}")

    for title, items in (
        ("Alignment Notes", guidance.alignment_notes),
        ("Study Strategies", guidance.study_strategies),
        ("Skill-Building Roadmap", guidance.skill_roadmap),
        ("Immediate Next Actions", guidance.immediate_actions),
    ):
        lines.append("")
        lines.append(title)
        lines.extend(f"- {item}" for item in items)

    return "\n".join(lines)
