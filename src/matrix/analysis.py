"""Per-requirement pattern analysis with caller-owned memoization.

Nothing here keeps state between calls. Callers that want caching pass in
any MutableMapping (a dict, an LRU mapping, a per-session store) and own
its lifetime:

    cache = {}
    for req in result.requirements:
        mapping = analyze_requirement(req, cache=cache)
"""

from typing import Dict, List, MutableMapping, Optional

from classifier.models import CategorySummary, PatternMapping
from classifier.text_classifier import find_matching_question_pattern, map_requirement_to_patterns

from .models import ParsedRequirement

CACHE_KEY_LENGTH = 50
UNCATEGORIZED = "uncategorized"


def cache_key(requirement: ParsedRequirement) -> str:
    """Key a requirement by id, falling back to the start of its text."""
    return requirement.id or requirement.text[:CACHE_KEY_LENGTH]


def analyze_requirement(
    requirement: ParsedRequirement,
    cache: Optional[MutableMapping[str, PatternMapping]] = None,
) -> PatternMapping:
    """Map a requirement to library patterns, including question patterns.

    Args:
        requirement: Requirement to analyze
        cache: Optional mapping to read from and store results in

    Returns:
        PatternMapping for the requirement
    """
    key = cache_key(requirement)
    if cache is not None and key in cache:
        return cache[key]

    mapping = map_requirement_to_patterns(
        requirement.text,
        short_text=requirement.short_text,
        regulatory_ref=requirement.regulatory_ref,
    )
    mapping.question_pattern = find_matching_question_pattern(
        requirement.text or requirement.short_text
    )

    if cache is not None:
        cache[key] = mapping

    return mapping


def analyze_requirements(
    requirements: List[ParsedRequirement],
    cache: Optional[MutableMapping[str, PatternMapping]] = None,
) -> List[tuple[ParsedRequirement, PatternMapping]]:
    """Analyze a batch of requirements, pairing each with its mapping."""
    return [(req, analyze_requirement(req, cache=cache)) for req in requirements]


def get_category_summary(
    requirements: List[ParsedRequirement],
    cache: Optional[MutableMapping[str, PatternMapping]] = None,
) -> List[CategorySummary]:
    """Count requirements per primary category, largest group first."""
    summary: Dict[str, CategorySummary] = {}

    for req in requirements:
        primary = analyze_requirement(req, cache=cache).primary_category
        category_id = primary.id if primary else UNCATEGORIZED

        if category_id not in summary:
            summary[category_id] = CategorySummary(
                id=category_id,
                name=primary.name if primary else "Uncategorized",
            )

        summary[category_id].count += 1
        summary[category_id].requirements.append(req.id)

    return sorted(summary.values(), key=lambda s: s.count, reverse=True)
