"""
Survey Variants

The regular and VHSC surveys share one scoring engine but use their own
question banks, lookup tables, stream catalogs and enrichment rules. A
VariantConfig bundles those choices so a scoring call resolves them once.
"""

import logging
from enum import Enum
from typing import Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict

from .catalog import REGULAR_STREAMS, VHSC_STREAMS, Stream
from .constants import (
    ACADEMIC_BAND_SCORES,
    ACADEMIC_INDEX_TABLE,
    APTITUDE_INDEX_TABLE,
    CONTEXT_INDEX_TABLE,
    PERSONALITY_TRAIT_TABLE,
    REGULAR_RIASEC_SCALE,
    REGULAR_RIASEC_TABLE,
    STREAM_WEIGHTS,
    VHSC_ACADEMIC_BAND_SCORES,
    VHSC_RIASEC_SCALE,
    VHSC_RIASEC_TABLE,
    VHSC_SECTION_PREFIX,
)
from .question_banks import APTITUDE_BANK, Question

logger = logging.getLogger(__name__)


class SurveyVariant(str, Enum):
    """Which survey a set of answers belongs to."""
    REGULAR = "regular"
    VHSC = "vhsc"


class VariantConfig(BaseModel):
    """All tables and constants that differ between survey variants."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    variant: SurveyVariant
    section_prefix: str
    aptitude_bank: Tuple[Question, ...]
    aptitude_table: Mapping[int, str]
    academic_table: Mapping[int, str]
    academic_bands: Mapping[str, float]
    riasec_table: Mapping[int, str]
    riasec_scale: int
    personality_table: Mapping[str, str]
    context_table: Mapping[int, str]
    stream_catalog: Tuple[Stream, ...]
    stream_weights: Mapping[str, float]
    enrich_abroad_options: bool
    enrich_high_demand_sectors: bool


REGULAR_CONFIG = VariantConfig(
    variant=SurveyVariant.REGULAR,
    section_prefix="",
    aptitude_bank=APTITUDE_BANK,
    aptitude_table=APTITUDE_INDEX_TABLE,
    academic_table=ACADEMIC_INDEX_TABLE,
    academic_bands=ACADEMIC_BAND_SCORES,
    riasec_table=REGULAR_RIASEC_TABLE,
    riasec_scale=REGULAR_RIASEC_SCALE,
    personality_table=PERSONALITY_TRAIT_TABLE,
    context_table=CONTEXT_INDEX_TABLE,
    stream_catalog=REGULAR_STREAMS,
    stream_weights=STREAM_WEIGHTS,
    enrich_abroad_options=True,
    enrich_high_demand_sectors=True,
)

VHSC_CONFIG = VariantConfig(
    variant=SurveyVariant.VHSC,
    section_prefix=VHSC_SECTION_PREFIX,
    aptitude_bank=APTITUDE_BANK,
    aptitude_table=APTITUDE_INDEX_TABLE,
    academic_table=ACADEMIC_INDEX_TABLE,
    academic_bands=VHSC_ACADEMIC_BAND_SCORES,
    riasec_table=VHSC_RIASEC_TABLE,
    riasec_scale=VHSC_RIASEC_SCALE,
    personality_table=PERSONALITY_TRAIT_TABLE,
    context_table=CONTEXT_INDEX_TABLE,
    stream_catalog=VHSC_STREAMS,
    stream_weights=STREAM_WEIGHTS,
    enrich_abroad_options=False,
    enrich_high_demand_sectors=False,
)

_CONFIGS = {
    SurveyVariant.REGULAR: REGULAR_CONFIG,
    SurveyVariant.VHSC: VHSC_CONFIG,
}


def resolve_variant(value: Union[SurveyVariant, str, None]) -> SurveyVariant:
    """
    Coerce a caller-supplied variant tag into a SurveyVariant.

    None means the regular survey. Unknown tags also fall back to the regular
    survey, with a warning.
    """
    if value is None:
        return SurveyVariant.REGULAR
    if isinstance(value, SurveyVariant):
        return value
    try:
        return SurveyVariant(str(value).strip().lower())
    except ValueError:
        logger.warning(f"Unknown survey variant {value!r}, using regular")
        return SurveyVariant.REGULAR


def get_variant_config(variant: Union[SurveyVariant, str, None] = None) -> VariantConfig:
    return _CONFIGS[resolve_variant(variant)]


def section_name(config: VariantConfig, base: str) -> str:
    """Name of a section as stored for this variant, e.g. 'vhsc-aptitude'."""
    return f"{config.section_prefix}{base}"
