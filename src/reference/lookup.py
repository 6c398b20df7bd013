"""Lookups over the reference library."""

from typing import List, Optional
import re

from utils.text import normalize_reference

from .library import COMPLIANCE_CATEGORIES, EVIDENCE_PATTERNS, REGULATORY_REFERENCES
from .models import (
    ComplianceCategory,
    EvidenceSuggestion,
    RegulatoryReference,
    ResolvedReference,
)

# Trailing "(d)" or "(a)(b)" on a reference id
SUB_PART_SUFFIX = re.compile(r'(?:\s*\([a-z]\))+$', re.IGNORECASE)
SUB_PART = re.compile(r'\(([a-z])\)', re.IGNORECASE)


def lookup_regulation(ref_id: Optional[str]) -> Optional[RegulatoryReference]:
    """Resolve a reference string to its library entry.

    Exact (normalized) matches win. Otherwise trailing sub-parts are stripped
    and the base reference is tried; when the base declares a table of
    sub-parts, the first sub-part's guidance is attached, so
    "CAR 903.02(d)" resolves to the CONOPS guidance of "CAR 903.02".

    Args:
        ref_id: Reference as written, e.g. "car 903.02 (d)"

    Returns:
        RegulatoryReference, ResolvedReference for a known sub-part, or None
    """
    normalized = normalize_reference(ref_id)
    if normalized is None:
        return None

    if normalized in REGULATORY_REFERENCES:
        return REGULATORY_REFERENCES[normalized]

    base_ref = SUB_PART_SUFFIX.sub("", normalized).strip()
    base = REGULATORY_REFERENCES.get(base_ref)
    if base is None:
        return None

    sub_part_match = SUB_PART.search(normalized[len(base_ref):])
    if sub_part_match and base.sub_parts:
        key = sub_part_match.group(1).lower()
        info = base.sub_parts.get(key)
        if info is not None:
            return ResolvedReference(
                **base.model_dump(exclude={"id"}),
                id=normalized,
                sub_part=key,
                sub_part_info=info,
            )

    return base


def get_category(category_id: Optional[str]) -> Optional[ComplianceCategory]:
    """Get a compliance category by id."""
    if not category_id:
        return None
    return COMPLIANCE_CATEGORIES.get(category_id)


def get_suggested_evidence(category_id: Optional[str]) -> List[EvidenceSuggestion]:
    """Evidence patterns that satisfy a category, in library order."""
    if get_category(category_id) is None:
        return []

    return [
        EvidenceSuggestion(
            id=evidence.id,
            name=evidence.name,
            description=evidence.description,
            source_types=list(evidence.source_types),
        )
        for evidence in EVIDENCE_PATTERNS.values()
        if category_id in evidence.satisfies
    ]


def get_related_regulations(category_id: Optional[str]) -> List[RegulatoryReference]:
    """Regulatory references owned by a category."""
    if not category_id:
        return []
    return [ref for ref in REGULATORY_REFERENCES.values() if ref.category == category_id]
