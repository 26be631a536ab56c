"""
Guidance Builder

Derives the narrative guidance sections of a report (study strategies,
skill roadmap, alignment notes, immediate actions) from a scored payload.
"""

from typing import Any, Dict, List, Mapping, Optional

from ..logic.variants import SurveyVariant, get_variant_config, resolve_variant
from .contracts import Guidance, ProfileInsights
from .grading import humanize_label
from .insights import top_riasec

MAX_STUDY_STRATEGIES = 6
STRONG_APTITUDE = 70
WEAK_SUBJECT = 60

LEARNING_STYLE_STRATEGIES: Dict[str, List[str]] = {
    "Visual": [
        "Use visual aids like diagrams, charts, and infographics",
        "Create mind maps and visual summaries",
        "Watch educational videos and animations",
        "Use color coding and highlighting techniques",
    ],
    "Auditory": [
        "Join study groups and engage in discussions",
        "Record yourself explaining concepts and listen back",
        "Use podcasts and audio lectures",
        "Explain topics out loud to test understanding",
    ],
    "Kinesthetic": [
        "Do hands-on projects and practical exercises",
        "Shadow practitioners and replicate their tasks",
        "Use physical models and manipulatives",
        "Take frequent breaks and move while studying",
    ],
}

MIXED_STRATEGIES = [
    "Blend visual, auditory, and kinesthetic methods",
    "Weekly teach-back session to a peer",
    "Use spaced repetition for retention",
    "Adapt study methods based on the subject matter",
]

# =============================================================================
# VHSC GUIDANCE
# =============================================================================

VHSC_STUDY_STRATEGIES = [
    "Focus on core subjects relevant to your recommended stream",
    "Practice past question papers and mock tests regularly",
    "Join study groups and discuss concepts with peers",
    "Use online resources and educational platforms for additional learning",
]

VHSC_SKILL_ROADMAP = [
    "Stream Selection: Choose your preferred stream based on assessment results",
    "Subject Focus: Strengthen foundation in stream-specific subjects",
    "Entrance Preparation: Prepare for relevant entrance examinations",
    "Career Planning: Research colleges and career options in your stream",
    "Skill Development: Build practical skills through projects and internships",
]

VHSC_IMMEDIATE_ACTIONS = [
    "Review your stream recommendations carefully",
    "Discuss results with parents and teachers",
    "Research colleges offering your preferred stream",
    "Start preparing for stream-specific entrance exams",
]

# =============================================================================
# REGULAR GUIDANCE
# =============================================================================

REGULAR_SKILL_ROADMAP = [
    "Stream Selection: Review your stream recommendations and choose your preferred path",
    "Subject Mastery: Strengthen foundation in stream-specific subjects",
    "Aptitude Development: Focus on improving key aptitude areas identified",
    "Career Exploration: Research colleges and career options in your chosen stream",
    "Skill Building: Develop practical skills through projects and internships",
    "Personal Growth: Work on personality traits that support your career goals",
]

REGULAR_IMMEDIATE_ACTIONS = [
    "Review your comprehensive assessment results and identify your top stream choice",
    "Discuss results with parents, teachers, and career counselors",
    "Research colleges and entrance exams for your chosen stream",
    "Create a study plan focusing on your weaker subjects and aptitude areas",
    "Start building a portfolio of projects related to your interests",
    "Connect with professionals in your recommended career paths",
]


def _strongest(scores: Mapping[str, float], n: int = 2) -> List[str]:
    return [label for label, _ in sorted(scores.items(), key=lambda x: x[1], reverse=True)[:n]]


def _top_stream(payload: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    recommendations = payload.get("streamRecommendations") or []
    return recommendations[0] if recommendations else None


def _vhsc_guidance(payload: Mapping[str, Any]) -> Guidance:
    config = get_variant_config(SurveyVariant.VHSC)
    top = _top_stream(payload) or {}

    alignment_notes = [
        f"Top Recommended Stream: {top.get('stream', 'N/A')}",
        "Academic Strengths: Based on your Grade 10 performance",
        "Aptitude Profile: Aligned with stream requirements",
        "Interest Alignment: Matches your RIASEC preferences",
    ]
    if config.enrich_abroad_options:
        alignment_notes.append(
            "Abroad Study Options: "
            + ("Available based on your profile" if top.get("abroadStudyOptions") else "Consider improving academic scores for international opportunities")
        )
    if config.enrich_high_demand_sectors:
        alignment_notes.append(
            "High-Demand Sectors: "
            + ("Multiple growing sectors identified" if top.get("highDemandSectors") else "Focus on skill development for emerging opportunities")
        )

    return Guidance(
        study_strategies=list(VHSC_STUDY_STRATEGIES),
        skill_roadmap=list(VHSC_SKILL_ROADMAP),
        alignment_notes=alignment_notes,
        immediate_actions=list(VHSC_IMMEDIATE_ACTIONS),
    )


def study_strategies(
    aptitude: Mapping[str, float],
    academic: Mapping[str, float],
    learning_style: str,
) -> List[str]:
    """
    Study strategies for the regular survey.

    Learning-style strategies come first, then aptitude and weak-subject
    advice. Capped at six.
    """
    strategies = list(LEARNING_STYLE_STRATEGIES.get(learning_style, MIXED_STRATEGIES))

    if aptitude.get("logical", 0) > STRONG_APTITUDE:
        strategies.append("Focus on analytical problem-solving and logical reasoning exercises")
    if aptitude.get("spatial", 0) > STRONG_APTITUDE:
        strategies.append("Incorporate spatial visualization techniques in your studies")

    # Unanswered subjects hold 0 and are not reported as weak
    weak = [humanize_label(subject) for subject, score in academic.items() if 0 < score < WEAK_SUBJECT]
    if weak:
        strategies.append(f"Dedicate extra time to improve in: {', '.join(weak)}")

    return strategies[:MAX_STUDY_STRATEGIES]


def _regular_guidance(payload: Mapping[str, Any], insights: Optional[ProfileInsights]) -> Guidance:
    aptitude = payload.get("aptitudeScores") or {}
    interest = payload.get("interestScores") or {}
    academic = payload.get("academicPerformance") or {}
    personality = payload.get("personalityTraits") or {}
    context = payload.get("contextualInputs") or {}
    learning_style = insights.learning_style if insights else "Mixed"

    top = _top_stream(payload)
    top_line = (
        f"Top Recommended Stream: {top.get('stream')} (Score: {top.get('score')}/100)"
        if top else "Top Recommended Stream: N/A"
    )

    alignment_notes = [
        top_line,
        f"RIASEC Interests: {', '.join(top_riasec(interest, 3))} - Shows your vocational preferences",
        f"Strongest Aptitudes: {', '.join(_strongest(aptitude))}",
        f"Academic Profile: {', '.join(humanize_label(s) for s in _strongest(academic))} are your strongest subjects",
        f"Personality Traits: {', '.join(_strongest(personality))} are prominent",
        f"Contextual Support: {', '.join(humanize_label(f) for f in _strongest(context))}",
    ]

    return Guidance(
        study_strategies=study_strategies(aptitude, academic, learning_style),
        skill_roadmap=list(REGULAR_SKILL_ROADMAP),
        alignment_notes=alignment_notes,
        immediate_actions=list(REGULAR_IMMEDIATE_ACTIONS),
        insights=insights,
    )


def build_guidance(payload: Mapping[str, Any], insights: Optional[ProfileInsights] = None) -> Guidance:
    """
    Build the guidance sections for a scored assessment payload.

    Args:
        payload: Output of AssessmentOutput.to_payload()
        insights: Regular-survey profile insights, if available

    Returns:
        Guidance
    """
    if resolve_variant(payload.get("variant")) == SurveyVariant.VHSC:
        return _vhsc_guidance(payload)
    return _regular_guidance(payload, insights)
