"""Static compliance reference library and lookups."""

from .models import (
    SubPart,
    RegulatoryReference,
    ResolvedReference,
    ComplianceCategory,
    EvidencePattern,
    EvidenceSuggestion,
    QuestionPattern,
)
from .library import (
    REGULATORY_REFERENCES,
    COMPLIANCE_CATEGORIES,
    EVIDENCE_PATTERNS,
    QUESTION_PATTERNS,
)
from .lookup import (
    lookup_regulation,
    get_category,
    get_suggested_evidence,
    get_related_regulations,
)

__all__ = [
    "SubPart",
    "RegulatoryReference",
    "ResolvedReference",
    "ComplianceCategory",
    "EvidencePattern",
    "EvidenceSuggestion",
    "QuestionPattern",
    "REGULATORY_REFERENCES",
    "COMPLIANCE_CATEGORIES",
    "EVIDENCE_PATTERNS",
    "QUESTION_PATTERNS",
    "lookup_regulation",
    "get_category",
    "get_suggested_evidence",
    "get_related_regulations",
]
