"""
Report Module

Turns a scored assessment payload into guidance and rendered reports.
"""

from .contracts import FieldSuggestion, Guidance, ProfileInsights, RespondentDetails
from .grading import format_number, letter_grade
from .guidance import build_guidance
from .html_renderer import render_html
from .insights import analyze_profile
from .pdf_renderer import render_pdf
from .text_renderer import render_text

__all__ = [
    "FieldSuggestion",
    "Guidance",
    "ProfileInsights",
    "RespondentDetails",
    "analyze_profile",
    "build_guidance",
    "format_number",
    "letter_grade",
    "render_html",
    "render_pdf",
    "render_text",
]
