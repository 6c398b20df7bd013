"""Pydantic models for classification results."""

from typing import Optional, List
from pydantic import BaseModel, Field

from reference.models import (
    EvidenceSuggestion,
    QuestionPattern,
    RegulatoryReference,
)


class KeywordMatch(BaseModel):
    """A category or evidence pattern that matched some keywords."""

    id: str
    name: str
    matched_keywords: List[str]
    score: float  # matched / total keywords, in (0, 1]


class TextAnalysis(BaseModel):
    """Result of scoring one piece of text against the reference library."""

    categories: List[KeywordMatch] = Field(default_factory=list)  # Ranked, best first
    regulatory_refs: List[str] = Field(default_factory=list)
    evidence_types: List[KeywordMatch] = Field(default_factory=list)  # Ranked, best first
    keywords: List[str] = Field(default_factory=list)  # Flattened category keywords
    confidence: float = 0.0

    class Config:
        json_schema_extra = {
            "example": {
                "categories": [
                    {"id": "crew", "name": "Crew", "matched_keywords": ["pilot"], "score": 0.05}
                ],
                "regulatory_refs": ["CAR 901.54"],
                "evidence_types": [],
                "keywords": ["pilot"],
                "confidence": 0.175,
            }
        }


class QuestionMatch(QuestionPattern):
    """A question pattern together with the phrases that matched it."""

    matched_patterns: List[str] = Field(default_factory=list)
    confidence: float = 0.0


class PatternMapping(BaseModel):
    """Everything the library suggests for one requirement."""

    analysis: TextAnalysis
    primary_category: Optional[KeywordMatch] = None
    suggested_evidence: List[EvidenceSuggestion] = Field(default_factory=list)
    response_hints: List[str] = Field(default_factory=list)
    related_regulations: List[RegulatoryReference] = Field(default_factory=list)
    search_terms: List[str] = Field(default_factory=list)
    question_pattern: Optional[QuestionMatch] = None


class CategorySummary(BaseModel):
    """How many requirements landed in one category."""

    id: str
    name: str
    count: int = 0
    requirements: List[str] = Field(default_factory=list)  # Requirement ids
