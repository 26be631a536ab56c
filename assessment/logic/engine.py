"""
Assessment Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for scoring a completed survey.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .aggregator import compute_composite
from .category_mappers import (
    map_academic,
    map_aptitude,
    map_context,
    map_interest,
    map_personality,
)
from .contracts import AssessmentOutput, CategoryScore
from .normalizer import normalize_answers, organize_sections
from .output_assembler import assemble_output
from .ranker import build_recommendations, rank_streams, score_catalog
from .variants import SurveyVariant, get_variant_config, section_name

logger = logging.getLogger(__name__)

# Domain -> (stored section name, mapper)
SECTION_MAPPERS = {
    "aptitude": ("aptitude", map_aptitude),
    "interest": ("career", map_interest),
    "academic": ("academic", map_academic),
    "personality": ("personality", map_personality),
    "context": ("context", map_context),
}


class AssessmentEngine:
    """
    Scores one survey variant.

    Pipeline flow:
    1. Normalization - Raw answer payloads to (index, answer) pairs
    2. Category Mapping - One CategoryScore per domain
    3. Composite - Domain averages and the weighted score
    4. Ranking - Score, rank and annotate every catalog stream
    5. Output Assembly - Build the final AssessmentOutput
    """

    def __init__(self, variant: Union[SurveyVariant, str, None] = None):
        """
        Initialize the engine.

        Args:
            variant: Survey variant tag. None selects the regular survey.
        """
        self.config = get_variant_config(variant)
        self.variant = self.config.variant

    def _section_answers(self, sections: Mapping[str, Any], base: str) -> Any:
        prefixed = section_name(self.config, base)
        if prefixed in sections:
            return sections[prefixed]
        return sections.get(base)

    def score_sections(self, sections: Optional[Mapping[str, Any]]) -> AssessmentOutput:
        """
        Score a mapping of section name -> raw answers.

        Section names may carry the variant prefix ("vhsc-aptitude") or not;
        the prefixed name wins when both are present.

        Args:
            sections: Raw answers keyed by section name

        Returns:
            AssessmentOutput with every category, the composite and the ranking
        """
        sections = sections or {}
        categories: Dict[str, CategoryScore] = {}
        missing: List[str] = []

        for domain, (base, mapper) in SECTION_MAPPERS.items():
            pairs = normalize_answers(self._section_answers(sections, base))
            if not pairs:
                missing.append(domain)
            categories[domain] = mapper(pairs, self.config)

        output = self._finish(categories, missing)
        logger.info(
            f"Scored {self.variant.value} assessment: "
            f"weighted={output.composite.weighted_score}, "
            f"top={output.stream_recommendations[0].stream if output.stream_recommendations else None}"
        )
        return output

    def score_responses(self, responses: Iterable[Any]) -> AssessmentOutput:
        """Score stored response rows ({section, answers} dicts or ORM objects)."""
        return self.score_sections(organize_sections(responses))

    def score_categories(
        self,
        aptitude: CategoryScore,
        interest: CategoryScore,
        academic: CategoryScore,
        personality: CategoryScore,
        context: CategoryScore,
    ) -> AssessmentOutput:
        """
        Rank streams from precomputed category scores.

        Used for stored assessment snapshots, where the raw answers are no
        longer needed.
        """
        categories = {
            "aptitude": aptitude,
            "interest": interest,
            "academic": academic,
            "personality": personality,
            "context": context,
        }
        return self._finish(categories, [])

    def _finish(self, categories: Dict[str, CategoryScore], missing: List[str]) -> AssessmentOutput:
        composite = compute_composite(
            categories["aptitude"],
            categories["interest"],
            categories["academic"],
            categories["personality"],
            categories["context"],
        )

        scored = score_catalog(self.config.stream_catalog, categories, self.config.stream_weights)
        ranked = rank_streams(scored)
        recommendations = build_recommendations(ranked, categories, self.config)

        return assemble_output(
            config=self.config,
            categories=categories,
            composite=composite,
            recommendations=recommendations,
            missing_sections=missing,
        )


# Convenience function for simple usage
def score_assessment(
    sections: Optional[Mapping[str, Any]],
    variant: Union[SurveyVariant, str, None] = None,
) -> AssessmentOutput:
    """
    Score a survey in one call.

    Args:
        sections: Raw answers keyed by section name
        variant: Survey variant tag

    Returns:
        AssessmentOutput
    """
    return AssessmentEngine(variant).score_sections(sections)
