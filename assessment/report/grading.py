"""
Report Grading Helpers

Letter grades and number formatting shared by every report renderer.
"""

import math
from typing import Any

from ..logic.constants import FAILING_GRADE, GRADE_THRESHOLDS


def letter_grade(score: float) -> str:
    """Map a 0-100 score to a letter grade (A+ .. F)."""
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return FAILING_GRADE


def format_number(value: Any) -> str:
    """Format a number with two decimals. Non-numbers and NaN render as "0.00"."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "0.00"
    if math.isnan(value):
        return "0.00"
    return f"{value:.2f}"


def humanize_label(label: str) -> str:
    """Turn a camelCase key such as "socialScience" into "Social Science"."""
    words = []
    current = ""
    for char in label:
        if char.isupper() and current:
            words.append(current)
            current = char
        else:
            current += char
    if current:
        words.append(current)
    return " ".join(word[:1].upper() + word[1:] for word in words)
