"""
Scoring Engine Constants

Defines all category labels, lookup tables, weights and thresholds used by the
stream assessment engine. All values are static reference data: loaded once at
import and never mutated.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

ENGINE_VERSION = "1.0.0"

# =============================================================================
# CATEGORY LABELS
# =============================================================================

APTITUDE_CATEGORIES: Tuple[str, ...] = (
    "numerical",
    "verbal",
    "spatial",
    "mechanical",
    "logical",
)

ACADEMIC_SUBJECTS: Tuple[str, ...] = (
    "maths",
    "science",
    "english",
    "socialScience",
    "languages",
)

RIASEC_LETTERS: Tuple[str, ...] = ("R", "I", "A", "S", "E", "C")

BIG_FIVE_TRAITS: Tuple[str, ...] = (
    "openness",
    "conscientiousness",
    "extraversion",
    "agreeableness",
    "neuroticism",
)

CONTEXT_FACTORS: Tuple[str, ...] = (
    "careerAwareness",
    "resourceAccess",
    "parentalSupport",
)

# =============================================================================
# APTITUDE
# =============================================================================

CORRECT_ANSWER_POINTS = 100
APTITUDE_QUESTIONS_PER_CATEGORY = 5

# Questions 1-5 numerical, 6-10 verbal, 11-15 spatial, 16-20 mechanical, 21-25 logical
APTITUDE_INDEX_TABLE: Mapping[int, str] = MappingProxyType({
    index: category
    for position, category in enumerate(APTITUDE_CATEGORIES)
    for index in range(
        position * APTITUDE_QUESTIONS_PER_CATEGORY,
        (position + 1) * APTITUDE_QUESTIONS_PER_CATEGORY,
    )
})

# =============================================================================
# ACADEMIC PERFORMANCE
# =============================================================================

ACADEMIC_INDEX_TABLE: Mapping[int, str] = MappingProxyType({
    0: "maths",
    1: "science",
    2: "english",
    3: "socialScience",
    4: "languages",
})

# Regular survey banding (highest band first)
ACADEMIC_BAND_SCORES: Mapping[str, float] = MappingProxyType({
    "81-100%": 90,
    "61-80%": 70,
    "41-60%": 50,
    "0-40%": 20,
})

# VHSC survey banding (lowest band first)
VHSC_ACADEMIC_BAND_SCORES: Mapping[str, float] = MappingProxyType({
    "0-40%": 20,
    "41-60%": 50,
    "61-80%": 70,
    "81-100%": 90,
})

# =============================================================================
# RIASEC INTEREST
# =============================================================================

INTEREST_YES = "Yes"

# One letter per question index. Indices listed twice in the source survey
# sheet resolve to their last listed letter.
REGULAR_RIASEC_TABLE: Mapping[int, str] = MappingProxyType({
    0: "R", 6: "R", 20: "R", 21: "R", 23: "R", 33: "R", 38: "R",
    1: "I", 10: "I", 17: "I", 22: "I", 25: "I", 27: "I", 34: "I", 40: "I",
    7: "A", 29: "A", 32: "A", 42: "A",
    3: "S", 11: "S", 12: "S", 14: "S", 19: "S", 41: "S",
    9: "E", 18: "E", 28: "E", 30: "E", 35: "E", 37: "E", 43: "E",
    5: "C", 8: "C", 16: "C", 24: "C", 26: "C", 36: "C",
})

VHSC_RIASEC_TABLE: Mapping[int, str] = MappingProxyType({
    0: "R", 6: "R", 20: "R", 21: "R", 23: "R", 33: "R", 38: "R",
    1: "I", 10: "I", 17: "I", 22: "I", 25: "I", 27: "I", 34: "I", 40: "I",
    7: "A", 29: "A", 32: "A", 42: "A",
    3: "S", 11: "S", 12: "S", 14: "S", 19: "S", 41: "S",
    9: "E", 18: "E", 28: "E", 30: "E", 35: "E", 37: "E", 43: "E",
    5: "C", 8: "C", 16: "C", 24: "C", 26: "C", 36: "C",
})

# Denominator for displaying raw counts as percentages
REGULAR_RIASEC_SCALE = 15
VHSC_RIASEC_SCALE = 10

# =============================================================================
# PERSONALITY (BIG FIVE)
# =============================================================================

PERSONALITY_TRAIT_TABLE: Mapping[str, str] = MappingProxyType({
    "Values and wisdom": "openness",
    "Integrity and perfection": "conscientiousness",
    "Work hard play hard": "conscientiousness",
    "Stability and balance": "agreeableness",
    "I am comfortable dealing with conflict and helping people find middle ground. My role is the mediator.": "agreeableness",
    "I make sure everything and everyone is taken care of. My role is the protector.": "agreeableness",
    "I help my family understand work ethic, hustle, and the value of having resources. My role is material support.": "conscientiousness",
    "I focus on nurturing and wanting a healthy and content family.": "agreeableness",
    "Honest and smart": "openness",
    "Strong presence and power": "extraversion",
    "Fun and dynamic": "extraversion",
    "Reliable and respectful": "conscientiousness",
    "Documentaries, biographies, human observation": "openness",
    "Entertainment, politics, current affairs": "extraversion",
    "Comedy, sport, drama, motivational stories": "extraversion",
    "Soap operas, reality TV, family, gossip, daytime shows": "neuroticism",
    "Calm, composed, balanced": "agreeableness",
    "Irritated, frustrated, angry": "neuroticism",
    "Moody, loud, restless": "neuroticism",
    "Lazy, depressed, worried": "neuroticism",
})

# =============================================================================
# CONTEXTUAL FACTORS
# =============================================================================

CONTEXT_INDEX_TABLE: Mapping[int, str] = MappingProxyType({
    0: "careerAwareness",
    1: "resourceAccess",
    2: "parentalSupport",
})

# Checked in order; first keyword hit wins
CONTEXT_KEYWORD_SCORES: Tuple[Tuple[Tuple[str, ...], float], ...] = (
    (("Very", "Excellent"), 90),
    (("Moderately", "Good"), 70),
    (("Somewhat",), 50),
)
CONTEXT_FALLBACK_SCORE = 30

# =============================================================================
# COMPOSITE WEIGHTS
# =============================================================================

# Fixed design constants (must sum to 1.0)
COMPOSITE_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "aptitude": 0.40,
    "interest": 0.25,
    "academic": 0.20,
    "personality": 0.10,
    "context": 0.05,
})

# =============================================================================
# STREAM RANKING
# =============================================================================

STREAM_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "academic": 0.40,
    "aptitude": 0.30,
    "interest": 0.20,
    "context": 0.10,
})

# Abroad study gates: stream -> minimum averages required
ABROAD_THRESHOLDS: Mapping[str, Dict[str, float]] = MappingProxyType({
    "Science": {"academic": 75, "openness": 70},
    "Commerce": {"academic": 70, "resourceAccess": 60},
    "Arts/Humanities": {"academic": 65, "openness": 75},
})

DEFAULT_TOP_N = 3

# =============================================================================
# REPORT GRADING
# =============================================================================

GRADE_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (95, "A+"),
    (85, "A"),
    (75, "B+"),
    (65, "B"),
    (55, "C+"),
    (45, "C"),
    (35, "D"),
)
FAILING_GRADE = "F"

# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULT_SCORE = 0.0
VHSC_SECTION_PREFIX = "vhsc-"
