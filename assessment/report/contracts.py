"""
Report Contracts

Pydantic models consumed and produced by the report layer. The scoring
engine knows nothing about these.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RespondentDetails(BaseModel):
    """Who the report is for."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    current_qualification: str = ""
    contact_info: str = ""


class FieldSuggestion(BaseModel):
    """Career field suggested from the regular survey's profile insights."""
    field: str
    professions: List[str] = Field(default_factory=list)
    reason: str = ""


class ProfileInsights(BaseModel):
    """Extra profile analysis for the regular survey."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    personality_type: str = "Balanced"
    top_intelligences: List[str] = Field(default_factory=list)
    learning_style: str = "Mixed"
    field_suggestions: List[FieldSuggestion] = Field(default_factory=list)


class Guidance(BaseModel):
    """Narrative guidance sections shown under the scores."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    study_strategies: List[str] = Field(default_factory=list)
    skill_roadmap: List[str] = Field(default_factory=list)
    alignment_notes: List[str] = Field(default_factory=list)
    immediate_actions: List[str] = Field(default_factory=list)
    insights: Optional[ProfileInsights] = None
