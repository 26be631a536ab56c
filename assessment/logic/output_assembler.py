"""
Output Assembler

Builds the final AssessmentOutput contract from category scores, the
composite and the ranked recommendations, and derives the output warnings.
"""

import logging
from typing import List, Mapping, Optional, Sequence

from .contracts import AssessmentOutput, CategoryScore, CompositeScore, StreamRecommendation
from .variants import VariantConfig

logger = logging.getLogger(__name__)

SECTION_DOMAINS = ("aptitude", "interest", "academic", "personality", "context")


def assemble_output(
    config: VariantConfig,
    categories: Mapping[str, CategoryScore],
    composite: CompositeScore,
    recommendations: Sequence[StreamRecommendation],
    missing_sections: Optional[Sequence[str]] = None,
) -> AssessmentOutput:
    """
    Assemble the final AssessmentOutput.

    Args:
        config: Active survey variant
        categories: Category scores keyed by domain name
        composite: Composite scores
        recommendations: Full ranked recommendation list
        missing_sections: Domains with no usable answers, if known

    Returns:
        Complete AssessmentOutput
    """
    warnings = _generate_warnings(missing_sections or [])
    for warning in warnings:
        logger.info(warning)

    return AssessmentOutput(
        variant=config.variant,
        aptitude=categories["aptitude"],
        interest=categories["interest"],
        academic=categories["academic"],
        personality=categories["personality"],
        context=categories["context"],
        composite=composite,
        stream_recommendations=list(recommendations),
        warnings=warnings,
    )


def _generate_warnings(missing_sections: Sequence[str]) -> List[str]:
    """Generate warnings about sections that contributed no answers."""
    missing = [domain for domain in SECTION_DOMAINS if domain in missing_sections]
    if len(missing) == len(SECTION_DOMAINS):
        return ["No responses found for any section"]
    return [f"No answers found for section '{domain}'; its scores default to 0" for domain in missing]
