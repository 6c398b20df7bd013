"""Assembly of segmented units into classified requirements."""

from classifier.patterns import extract_citation
from classifier.text_classifier import map_requirement_to_patterns
from utils.text import generate_short_text, normalize_reference

from .models import ParsedRequirement, ParseResult, RequirementUnit

MAX_SUGGESTIONS = 3
MAX_HINTS = 3


def requirement_id(order: int) -> str:
    """Stable id for the requirement at a given position, e.g. "req-007"."""
    return f"req-{order:03d}"


def assemble_requirement(unit: RequirementUnit, order: int) -> ParsedRequirement:
    """Process a segmented unit into a structured requirement.

    A reference supplied by the unit (a table column or an imported field)
    wins over one found in the text; both come out normalized. Units that
    match nothing still come back, uncategorized with confidence 0.

    Args:
        unit: Segmented unit
        order: 1-based position in the document

    Returns:
        ParsedRequirement with default editing fields
    """
    text = " ".join([unit.raw_text, *unit.continuations]).strip()

    regulatory_ref = normalize_reference(unit.regulatory_ref) or extract_citation(text)

    mapping = map_requirement_to_patterns(text, regulatory_ref=regulatory_ref)
    primary = mapping.primary_category

    return ParsedRequirement(
        id=requirement_id(order),
        order=order,
        text=text,
        short_text=generate_short_text(text),
        section=unit.section or None,
        subsection=unit.subsection or None,
        regulatory_ref=regulatory_ref,
        category=primary.id if primary else None,
        category_name=primary.name if primary else None,
        confidence=mapping.analysis.confidence,
        suggested_evidence=mapping.suggested_evidence[:MAX_SUGGESTIONS],
        response_hints=mapping.response_hints[:MAX_HINTS],
        search_terms=mapping.search_terms,
    )


def record_requirement(result: ParseResult, requirement: ParsedRequirement) -> None:
    """Append a requirement and update the running statistics."""
    result.requirements.append(requirement)
    result.stats.total_requirements += 1

    if requirement.category:
        result.stats.categorized += 1
        result.categories[requirement.category] = result.categories.get(requirement.category, 0) + 1
    else:
        result.stats.uncategorized += 1

    if requirement.regulatory_ref:
        result.stats.with_reg_ref += 1
        if requirement.regulatory_ref not in result.regulatory_refs:
            result.regulatory_refs.append(requirement.regulatory_ref)
