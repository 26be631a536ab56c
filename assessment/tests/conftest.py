"""
Shared fixtures for the assessment tests.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest

from assessment.logic.question_banks import APTITUDE_BANK
from assessment.logic.variants import REGULAR_CONFIG, VHSC_CONFIG


@pytest.fixture
def regular_config():
    return REGULAR_CONFIG


@pytest.fixture
def vhsc_config():
    return VHSC_CONFIG


@pytest.fixture
def all_correct_aptitude():
    return {f"q{i + 1}": question.correct for i, question in enumerate(APTITUDE_BANK)}


@pytest.fixture
def sample_sections(all_correct_aptitude):
    """A complete regular survey with strong science signals."""
    return {
        "aptitude": all_correct_aptitude,
        "academic": {"q1": "81-100%", "q2": "81-100%", "q3": "61-80%", "q4": "41-60%", "q5": "61-80%"},
        "career": {"q1": "Yes", "q2": "Yes", "q7": "Yes", "q11": "Yes", "q4": "No"},
        "personality": {
            "q1": "Values and wisdom",
            "q3": "Honest and smart",
            "q4": "Documentaries, biographies, human observation",
            "q5": "Calm, composed, balanced",
        },
        "context": {"q1": "Very aware", "q2": "Excellent access", "q3": "Very supportive"},
    }
