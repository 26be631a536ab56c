"""
Category Mappers

One pure function per assessment domain. Each mapper turns normalized
(index, answer) pairs into a CategoryScore using the lookup tables of the
active survey variant.

Mappers never raise on answer content: unknown indices, unknown options and
unknown band labels are skipped, and every label of the domain is always
present in the result (0 when no data).
"""

import logging
from typing import Dict, Iterable, Mapping

from .constants import (
    ACADEMIC_SUBJECTS,
    APTITUDE_CATEGORIES,
    BIG_FIVE_TRAITS,
    CONTEXT_FACTORS,
    CONTEXT_FALLBACK_SCORE,
    CONTEXT_KEYWORD_SCORES,
    CORRECT_ANSWER_POINTS,
    DEFAULT_SCORE,
    INTEREST_YES,
    RIASEC_LETTERS,
)
from .contracts import CategoryScore
from .normalizer import AnswerPair, to_answer_map
from .question_banks import question_at
from .variants import VariantConfig

logger = logging.getLogger(__name__)


def _zeroed(labels: Iterable[str]) -> Dict[str, float]:
    return {label: DEFAULT_SCORE for label in labels}


# =============================================================================
# APTITUDE
# =============================================================================

def map_aptitude(pairs: Iterable[AnswerPair], config: VariantConfig) -> CategoryScore:
    """
    Score aptitude answers per category.

    Each valid answer counts towards its category; a correct answer awards
    100 points. The category score is the average, rounded to 1 decimal.

    Args:
        pairs: Normalized (index, answer) pairs
        config: Active survey variant

    Returns:
        CategoryScore with correct/total counts per category
    """
    sums = {category: 0 for category in APTITUDE_CATEGORIES}
    counts = {category: 0 for category in APTITUDE_CATEGORIES}
    correct = {category: 0 for category in APTITUDE_CATEGORIES}

    for index, answer in to_answer_map(pairs).items():
        category = config.aptitude_table.get(index)
        question = question_at(config.aptitude_bank, index)
        if category is None or question is None:
            continue

        if not question.accepts(answer):
            logger.warning(f"Invalid aptitude answer for question {index + 1}: {answer!r}")
            continue

        counts[category] += 1
        if answer == question.correct:
            sums[category] += CORRECT_ANSWER_POINTS
            correct[category] += 1

    scores = {
        category: round(sums[category] / counts[category], 1) if counts[category] else DEFAULT_SCORE
        for category in APTITUDE_CATEGORIES
    }
    return CategoryScore(domain="aptitude", scores=scores, correct=correct, total=counts)


# =============================================================================
# ACADEMIC PERFORMANCE
# =============================================================================

def map_academic(pairs: Iterable[AnswerPair], config: VariantConfig) -> CategoryScore:
    """Map percentage band answers to subject scores."""
    scores = _zeroed(ACADEMIC_SUBJECTS)

    for index, answer in to_answer_map(pairs).items():
        subject = config.academic_table.get(index)
        if subject is None:
            continue
        band_score = config.academic_bands.get(answer)
        if band_score is None:
            logger.warning(f"Unknown academic band for {subject}: {answer!r}")
            continue
        scores[subject] = float(band_score)

    return CategoryScore(domain="academic", scores=scores)


# =============================================================================
# RIASEC INTEREST
# =============================================================================

def map_interest(pairs: Iterable[AnswerPair], config: VariantConfig) -> CategoryScore:
    """Count "Yes" answers per RIASEC letter. Scores are raw counts."""
    scores = _zeroed(RIASEC_LETTERS)

    for index, answer in to_answer_map(pairs).items():
        letter = config.riasec_table.get(index)
        if letter is not None and answer == INTEREST_YES:
            scores[letter] += 1

    return CategoryScore(domain="interest", scores=scores)


def interest_percentages(scores: Mapping[str, float], scale: int) -> Dict[str, float]:
    """
    Express raw RIASEC counts as percentages of the variant's display scale.

    Args:
        scores: Raw counts keyed by RIASEC letter
        scale: Denominator for the display (15 regular, 10 VHSC)
    """
    if scale <= 0:
        return _zeroed(RIASEC_LETTERS)
    return {
        letter: round(scores.get(letter, 0) / scale * 100, 2)
        for letter in RIASEC_LETTERS
    }


# =============================================================================
# PERSONALITY (BIG FIVE)
# =============================================================================

def map_personality(pairs: Iterable[AnswerPair], config: VariantConfig) -> CategoryScore:
    """
    Map answer texts to Big Five traits.

    A trait's score is its share of all matched answers, as a percentage
    rounded to 1 decimal. Unmatched texts are ignored.
    """
    counts = {trait: 0 for trait in BIG_FIVE_TRAITS}

    for _, answer in to_answer_map(pairs).items():
        trait = config.personality_table.get(answer)
        if trait is not None:
            counts[trait] += 1

    matched = sum(counts.values())
    if matched == 0:
        return CategoryScore(domain="personality", scores=_zeroed(BIG_FIVE_TRAITS))

    scores = {
        trait: round(counts[trait] / matched * 100, 1)
        for trait in BIG_FIVE_TRAITS
    }
    return CategoryScore(domain="personality", scores=scores)


# =============================================================================
# CONTEXTUAL FACTORS
# =============================================================================

def context_keyword_score(answer: str) -> float:
    """Score a free-text context answer by its first matching keyword group."""
    for keywords, score in CONTEXT_KEYWORD_SCORES:
        if any(keyword in answer for keyword in keywords):
            return float(score)
    return float(CONTEXT_FALLBACK_SCORE)


def map_context(pairs: Iterable[AnswerPair], config: VariantConfig) -> CategoryScore:
    scores = _zeroed(CONTEXT_FACTORS)

    for index, answer in to_answer_map(pairs).items():
        factor = config.context_table.get(index)
        if factor is None:
            continue
        scores[factor] = context_keyword_score(answer)

    return CategoryScore(domain="context", scores=scores)
