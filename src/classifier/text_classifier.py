"""Keyword classifier for compliance text.

Scores text against every compliance category and evidence pattern in the
reference library, extracts regulatory references, and combines the
signals into a single confidence value:

    confidence = min(1, (top_category + top_evidence + reference_bonus) / 2)

where reference_bonus is 0.3 when any reference was found. Several weak
signals together can therefore outrank one strong signal.
"""

from typing import Iterable, List, Optional

from reference.library import COMPLIANCE_CATEGORIES, EVIDENCE_PATTERNS, QUESTION_PATTERNS
from reference.lookup import get_related_regulations, get_suggested_evidence

from .models import KeywordMatch, PatternMapping, QuestionMatch, TextAnalysis
from .patterns import extract_references

REFERENCE_BONUS = 0.3
SEARCH_KEYWORD_LIMIT = 5


def _score(text_lower: str, patterns: Iterable) -> List[KeywordMatch]:
    """Rank patterns by the share of their keywords found in the text."""
    matches = []

    for pattern in patterns:
        matched = [kw for kw in pattern.keywords if kw in text_lower]
        if matched:
            matches.append(KeywordMatch(
                id=pattern.id,
                name=pattern.name,
                matched_keywords=matched,
                score=len(matched) / len(pattern.keywords),
            ))

    # sorted() is stable: equal scores keep library order
    return sorted(matches, key=lambda m: m.score, reverse=True)


def analyze_compliance_text(text: str) -> TextAnalysis:
    """Analyze text to identify compliance categories, references and evidence.

    Args:
        text: Requirement, question or any free text

    Returns:
        TextAnalysis with ranked matches and a confidence in [0, 1]
    """
    if not text:
        return TextAnalysis()

    text_lower = text.lower()

    categories = _score(text_lower, COMPLIANCE_CATEGORIES.values())
    evidence_types = _score(text_lower, EVIDENCE_PATTERNS.values())
    regulatory_refs = extract_references(text)

    keywords = []
    for category in categories:
        keywords.extend(category.matched_keywords)

    category_score = categories[0].score if categories else 0.0
    evidence_score = evidence_types[0].score if evidence_types else 0.0
    ref_score = REFERENCE_BONUS if regulatory_refs else 0.0

    return TextAnalysis(
        categories=categories,
        regulatory_refs=regulatory_refs,
        evidence_types=evidence_types,
        keywords=keywords,
        confidence=min((category_score + evidence_score + ref_score) / 2, 1.0),
    )


def find_matching_question_pattern(text: Optional[str]) -> Optional[QuestionMatch]:
    """Find the first common question pattern phrased in the text."""
    if not text:
        return None

    text_lower = text.lower()

    for question in QUESTION_PATTERNS.values():
        matched = [p for p in question.patterns if p in text_lower]
        if matched:
            return QuestionMatch(
                **question.model_dump(),
                matched_patterns=matched,
                confidence=len(matched) / len(question.patterns),
            )

    return None


def map_requirement_to_patterns(
    text: str,
    short_text: Optional[str] = None,
    guidance: Optional[str] = None,
    regulatory_ref: Optional[str] = None,
) -> PatternMapping:
    """Map a requirement to categories, evidence and response hints.

    All supplied fields are classified together, so a reference passed in
    separately still earns the reference bonus.
    """
    combined = " ".join(part for part in [text, short_text, guidance, regulatory_ref] if part)
    analysis = analyze_compliance_text(combined)

    primary = analysis.categories[0] if analysis.categories else None

    if primary:
        category = COMPLIANCE_CATEGORIES[primary.id]
        suggested_evidence = get_suggested_evidence(primary.id)
        response_hints = list(category.typical_requirements)
        related = get_related_regulations(primary.id)
    else:
        suggested_evidence = []
        response_hints = []
        related = []

    return PatternMapping(
        analysis=analysis,
        primary_category=primary,
        suggested_evidence=suggested_evidence,
        response_hints=response_hints,
        related_regulations=related,
        search_terms=analysis.keywords[:SEARCH_KEYWORD_LIMIT] + analysis.regulatory_refs,
    )
