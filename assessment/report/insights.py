"""
Profile Insights

Regular-survey analysis of the sections the scoring engine does not use:
personality archetype, multiple intelligences and learning style, plus career
field suggestions that combine them with the RIASEC counts.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..logic.constants import RIASEC_LETTERS
from ..logic.normalizer import normalize_answers, to_answer_map
from .contracts import FieldSuggestion, ProfileInsights

logger = logging.getLogger(__name__)

DEFAULT_ARCHETYPE = "Balanced"
DEFAULT_LEARNING_STYLE = "Mixed"
MAX_FIELD_SUGGESTIONS = 5
TOP_INTELLIGENCES = 3

# =============================================================================
# LOOKUP TABLES
# =============================================================================

ARCHETYPE_TABLE: Dict[str, str] = {
    "Values and wisdom": "Philosopher",
    "Integrity and perfection": "Perfectionist",
    "Work hard play hard": "Achiever",
    "Stability and balance": "Balanced",
    "I am comfortable dealing with conflict and helping people find middle ground. My role is the mediator.": "Mediator",
    "I make sure everything and everyone is taken care of. My role is the protector.": "Protector",
    "I help my family understand work ethic, hustle, and the value of having resources. My role is material support.": "Provider",
    "I focus on nurturing and wanting a healthy and content family.": "Nurturer",
    "Honest and smart": "Intellectual",
    "Strong presence and power": "Leader",
    "Fun and dynamic": "Enthusiast",
    "Reliable and respectful": "Loyalist",
    "Documentaries, biographies, human observation": "Observer",
    "Entertainment, politics, current affairs": "Challenger",
    "Comedy, sport, drama, motivational stories": "Enthusiast",
    "Soap operas, reality TV, family, gossip, daytime shows": "Helper",
    "Calm, composed, balanced": "Peacemaker",
    "Irritated, frustrated, angry": "Challenger",
    "Moody, loud, restless": "Individualist",
    "Lazy, depressed, worried": "Loyalist",
}

INTELLIGENCES = (
    "Intrapersonal",
    "Musical",
    "Bodily-Kinesthetic",
    "Logical-Mathematical",
    "Linguistic",
    "Spatial",
    "Interpersonal",
    "Naturalistic",
)

_INTELLIGENCE_QUESTIONS = {
    "Intrapersonal": (0, 12, 31, 64, 65, 66),
    "Musical": (1, 3, 13, 18, 28, 59, 60, 74, 75),
    "Bodily-Kinesthetic": (2, 6, 15, 24, 38, 39, 49, 61, 73),
    "Logical-Mathematical": (4, 11, 17, 22, 33, 36, 57, 62),
    "Linguistic": (7, 8, 9, 25, 35, 69),
    "Spatial": (26, 42, 51, 52, 56, 68, 76, 77),
    "Interpersonal": (19, 20, 27, 40, 53, 67, 70, 71, 72, 78),
    "Naturalistic": (21, 32, 43, 44, 45, 46, 47, 54, 79, 80, 81),
}

# Zero-based question index -> intelligence
INTELLIGENCE_INDEX_TABLE: Dict[int, str] = {
    index: intelligence
    for intelligence, indices in _INTELLIGENCE_QUESTIONS.items()
    for index in indices
}

AGREEMENT_SCORES: Dict[str, int] = {
    "Mostly Disagree": 1,
    "Slightly Disagree": 2,
    "Slightly Agree": 3,
    "Mostly Agree": 4,
}
UNKNOWN_AGREEMENT_SCORE = 2

LEARNING_STYLES = ("Visual", "Auditory", "Kinesthetic")

_LEARNING_ANSWERS = {
    "Visual": (
        "Read the instructions manual", "Have a look at a map", "Look up a written recipe",
        "Start writing things down", "Have a look at how I do it", "Go to a museum/gallery",
        "Imagine how I'd look in them", "Read brochures", "Read reviews", "Watch a teacher",
        "Look at others' food", "Watch the band and audience", "Focus on text/images",
        "Look at pictures", "A visual image", "Imagine bad outcomes", "How they look",
        "Make notes/diagrams", "Watching films, art, or people", "Watch Netflix",
        "Meet in person", "Replay the event in my head", "Faces", "They won't look at me",
        "Write a letter", "I see what you mean",
    ),
    "Auditory": (
        "Listen to someone who explains it", "Ask someone for directions",
        "Ask a friend or look up on YouTube", "Explain verbally", "Let me tell you how to do it",
        "Talk to friends/listen to music", "Talk to others about my choices",
        "Talk to friends about their trips", "Ask friends", "Talk through steps",
        "Talk through options", "Listen to the lyrics and beat", "Have an internal dialogue",
        "Listen to advice", "A sound or something said", "Hear an internal voice of doom",
        "What they say", "Talk over notes", "Listening to music or talking", "Talk to friends",
        "Call them", "Talk about it angrily", "Names", "Their voice sounds off", "I hear you",
    ),
    "Kinesthetic": (
        "Just have a go", "Get a rough idea then follow instincts",
        "Use my knowledge and experiment", "Demonstrate and let them try",
        "Do sports or hands-on activities", "Just try them on quickly", "Imagine myself there",
        "Book test drives", "Try and figure it out", "Imagine the taste", "Dance!",
        "Move or fidget", "Try the furniture", "A feeling or action", "Feel physically affected",
        "How they make me feel", "Visualize and imagine success", "Sports, eating, dancing",
        "Do physical or creative things", "Meet while doing something", "Physically show it",
        "Things I did", "I can feel it", "See them in person", "I know how you feel",
    ),
}

LEARNING_STYLE_TABLE: Dict[str, str] = {
    answer: style
    for style, answers in _LEARNING_ANSWERS.items()
    for answer in answers
}


# =============================================================================
# ANALYSIS
# =============================================================================

def _most_frequent(counts: Mapping[str, int]) -> Optional[str]:
    """Label with the highest count. Ties go to the label counted last."""
    best = None
    for label, count in counts.items():
        if best is None or count >= counts[best]:
            best = label
    return best


def analyze_personality(answers: Any) -> str:
    """Most frequent personality archetype among the answers."""
    counts: Dict[str, int] = {}
    for answer in to_answer_map(normalize_answers(answers)).values():
        archetype = ARCHETYPE_TABLE.get(answer)
        if archetype:
            counts[archetype] = counts.get(archetype, 0) + 1
    return _most_frequent(counts) or DEFAULT_ARCHETYPE


def analyze_intelligences(answers: Any) -> List[str]:
    """
    Top three multiple intelligences.

    Answers use a 4-point agreement scale; unrecognized answers count as 2.
    Returns an empty list when the section was not answered.
    """
    pairs = to_answer_map(normalize_answers(answers))
    if not pairs:
        return []

    scores = {intelligence: 0 for intelligence in INTELLIGENCES}
    for index, answer in pairs.items():
        intelligence = INTELLIGENCE_INDEX_TABLE.get(index)
        if intelligence:
            scores[intelligence] += AGREEMENT_SCORES.get(answer, UNKNOWN_AGREEMENT_SCORE)

    ranked = sorted(INTELLIGENCES, key=lambda x: scores[x], reverse=True)
    return ranked[:TOP_INTELLIGENCES]


def analyze_learning(answers: Any) -> str:
    """Dominant learning style, or "Mixed" when no answer matched a style."""
    counts = {style: 0 for style in LEARNING_STYLES}
    for answer in to_answer_map(normalize_answers(answers)).values():
        style = LEARNING_STYLE_TABLE.get(answer)
        if style:
            counts[style] += 1
    if not any(counts.values()):
        return DEFAULT_LEARNING_STYLE
    return _most_frequent(counts)


def top_riasec(interest_scores: Mapping[str, float], n: int) -> List[str]:
    """Top-n RIASEC letters by count, ties in R-I-A-S-E-C order."""
    return sorted(RIASEC_LETTERS, key=lambda x: interest_scores.get(x, 0), reverse=True)[:n]


def suggest_fields(
    interest_scores: Mapping[str, float],
    personality_type: str,
    intelligences: Sequence[str],
    learning_style: str,
) -> List[FieldSuggestion]:
    """
    Suggest career fields from RIASEC, intelligences, archetype and learning style.

    Returns:
        At most five suggestions, deduplicated by field name in order
    """
    top = top_riasec(interest_scores, 2)
    suggestions: List[FieldSuggestion] = []

    # RIASEC combinations
    if "R" in top and "I" in top:
        suggestions.append(FieldSuggestion(
            field="Engineering and Applied Sciences",
            professions=["Mechanical Engineer", "Civil Engineer", "Electrical Engineer", "Software Engineer", "Robotics Engineer"],
            reason="High Realistic + Investigative suggest practical, analytical problem-solving with tangible outcomes.",
        ))
    if "S" in top and "I" in top:
        suggestions.append(FieldSuggestion(
            field="Healthcare and Clinical Sciences",
            professions=["Doctor", "Nurse", "Pharmacist", "Clinical Research Associate", "Physiotherapist"],
            reason="High Social + Investigative indicates helping others using scientific knowledge and empathy.",
        ))
    if "A" in top and "E" in top:
        suggestions.append(FieldSuggestion(
            field="Creative Industries and Marketing",
            professions=["Product Designer", "UI/UX Designer", "Marketing Strategist", "Creative Director", "Entrepreneur"],
            reason="High Artistic + Enterprising points to creative expression with influence and initiative.",
        ))
    if "C" in top and "E" in top:
        suggestions.append(FieldSuggestion(
            field="Business, Finance, and Operations",
            professions=["Accountant", "Financial Analyst", "Business Operations Manager", "Banker", "Compliance Specialist"],
            reason="High Conventional + Enterprising suggests structured, goal-oriented business environments.",
        ))
    if "A" in top and not any("Creative" in s.field for s in suggestions):
        suggestions.append(FieldSuggestion(
            field="Architecture and Design",
            professions=["Architect", "Interior Designer", "Urban Planner", "Graphic Designer"],
            reason="High Artistic indicates visual-spatial creativity and aesthetics.",
        ))

    # Multiple intelligence overlays
    if "Logical-Mathematical" in intelligences:
        suggestions.append(FieldSuggestion(
            field="Data and Analytics",
            professions=["Data Analyst", "Data Scientist", "Business Intelligence Analyst"],
            reason="Logical-Mathematical intelligence aligns with quantitative analysis and modeling.",
        ))
    if "Linguistic" in intelligences:
        suggestions.append(FieldSuggestion(
            field="Content and Communication",
            professions=["Technical Writer", "Content Strategist", "Public Relations Specialist"],
            reason="Linguistic intelligence supports writing, storytelling, and persuasion.",
        ))
    if "Spatial" in intelligences:
        suggestions.append(FieldSuggestion(
            field="Product and Visual Design",
            professions=["Industrial Designer", "Animator", "Architectural Visualizer"],
            reason="Spatial intelligence fits visualization-heavy careers.",
        ))
    if "Interpersonal" in intelligences:
        suggestions.append(FieldSuggestion(
            field="People-Centered Roles",
            professions=["HR Business Partner", "Counselor", "Account Manager"],
            reason="Interpersonal intelligence favors collaboration and facilitation.",
        ))
    if "Intrapersonal" in intelligences:
        suggestions.append(FieldSuggestion(
            field="Research and Strategy",
            professions=["User Researcher", "Strategic Planner", "Coach"],
            reason="Intrapersonal intelligence aligns with reflection, goal-setting, and strategy.",
        ))

    # Archetype modifiers go first
    if personality_type in ("Leader", "Challenger", "Achiever"):
        suggestions.insert(0, FieldSuggestion(
            field="Leadership Tracks",
            professions=["Team Lead", "Product Manager", "Operations Manager", "Executive"],
            reason="Your leadership drive suggests roles with ownership, decision-making, and influence.",
        ))
    if personality_type in ("Nurturer", "Helper", "Protector"):
        suggestions.insert(0, FieldSuggestion(
            field="Education and Advisory",
            professions=["Teacher", "Learning Designer", "Career Counselor", "Social Worker"],
            reason="Your supportive orientation fits roles centered on growth and development of others.",
        ))
    if personality_type in ("Philosopher", "Observer", "Intellectual"):
        suggestions.insert(0, FieldSuggestion(
            field="Research and Analysis",
            professions=["Researcher", "Analyst", "Consultant", "Academic"],
            reason="Your analytical nature and love for deep thinking align with research-oriented roles.",
        ))

    if learning_style == "Kinesthetic":
        suggestions.append(FieldSuggestion(
            field="Apprenticeship/On-the-Job Tracks",
            professions=["Technician Apprentice", "Junior Mechanic", "Field Assistant", "Tradesperson"],
            reason="Kinesthetic learning thrives in practical environments with mentorship and immediate application.",
        ))

    seen = set()
    unique = []
    for suggestion in suggestions:
        if suggestion.field in seen:
            continue
        seen.add(suggestion.field)
        unique.append(suggestion)
    return unique[:MAX_FIELD_SUGGESTIONS]


def analyze_profile(
    sections: Optional[Mapping[str, Any]],
    interest_scores: Mapping[str, float],
) -> ProfileInsights:
    """
    Build profile insights from the regular survey's extra sections.

    Args:
        sections: Raw answers keyed by section name
        interest_scores: Raw RIASEC counts from the scored assessment

    Returns:
        ProfileInsights
    """
    sections = sections or {}
    personality_type = analyze_personality(sections.get("personality"))
    intelligences = analyze_intelligences(sections.get("intelligences"))
    learning_style = analyze_learning(sections.get("learning"))

    logger.debug(
        f"Profile insights: archetype={personality_type}, "
        f"intelligences={intelligences}, learning={learning_style}"
    )

    return ProfileInsights(
        personality_type=personality_type,
        top_intelligences=intelligences,
        learning_style=learning_style,
        field_suggestions=suggest_fields(interest_scores, personality_type, intelligences, learning_style),
    )
