"""Keyword classification of compliance text."""

from .models import KeywordMatch, TextAnalysis, QuestionMatch, PatternMapping, CategorySummary
from .patterns import extract_references, extract_citation, looks_like_reference
from .text_classifier import (
    analyze_compliance_text,
    find_matching_question_pattern,
    map_requirement_to_patterns,
)

__all__ = [
    "KeywordMatch",
    "TextAnalysis",
    "QuestionMatch",
    "PatternMapping",
    "CategorySummary",
    "extract_references",
    "extract_citation",
    "looks_like_reference",
    "analyze_compliance_text",
    "find_matching_question_pattern",
    "map_requirement_to_patterns",
]
