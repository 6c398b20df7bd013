"""Pydantic models for parsed compliance documents."""

import os
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field

from reference.models import EvidenceSuggestion


class StructureType(str, Enum):
    """Macro-layout of a compliance document."""

    NUMBERED_LIST = "numbered-list"
    TABLE = "table"
    SECTIONED = "sectioned"
    GENERIC = "generic"


class DetectedStructure(BaseModel):
    """Structure detected for a document and the evidence behind it."""

    type: StructureType = StructureType.GENERIC
    confidence: float = 0.0
    details: Dict[str, Any] = Field(default_factory=dict)  # pattern, delimiter or headers


class RequirementUnit(BaseModel):
    """A segmented chunk of text, before classification."""

    raw_text: str
    section: Optional[str] = None
    subsection: Optional[str] = None
    regulatory_ref: Optional[str] = None  # Supplied by a table column
    continuations: List[str] = Field(default_factory=list)
    cells: Dict[str, str] = Field(default_factory=dict)  # Table rows keyed by header


class ParsedRequirement(BaseModel):
    """A discrete, classified requirement."""

    # Identity
    id: str  # "req-001", derived from order unless imported
    order: int

    # Content
    text: str
    short_text: str

    # Document context
    section: Optional[str] = None
    subsection: Optional[str] = None
    regulatory_ref: Optional[str] = None

    # Classification
    category: Optional[str] = None
    category_name: Optional[str] = None
    confidence: float = 0.0
    suggested_evidence: List[EvidenceSuggestion] = Field(default_factory=list)
    response_hints: List[str] = Field(default_factory=list)
    search_terms: List[str] = Field(default_factory=list)

    # Filled in by whoever reviews the requirement
    status: str = "pending"
    response: str = ""
    notes: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "id": "req-002",
                "order": 2,
                "text": "CAR 901.54 applies to training records.",
                "short_text": "CAR 901.54 applies to training records",
                "regulatory_ref": "CAR 901.54",
                "category": "crew",
                "category_name": "Crew",
                "confidence": 0.45,
                "status": "pending",
            }
        }


class ParseStats(BaseModel):
    """Counts accumulated while assembling requirements."""

    total_requirements: int = 0
    categorized: int = 0
    uncategorized: int = 0
    with_reg_ref: int = 0


class ParseResult(BaseModel):
    """The complete result of parsing one document."""

    document_name: str
    document_type: str
    parsed_at: str

    requirements: List[ParsedRequirement] = Field(default_factory=list)
    detected_structure: DetectedStructure = Field(default_factory=DetectedStructure)

    # Aggregates
    categories: Dict[str, int] = Field(default_factory=dict)  # category id -> count
    regulatory_refs: List[str] = Field(default_factory=list)  # Distinct, first-seen order
    warnings: List[str] = Field(default_factory=list)
    stats: ParseStats = Field(default_factory=ParseStats)

    # Set when the result was rebuilt from an export
    source_exported_at: Optional[datetime] = None


class ParseOptions(BaseModel):
    """Every option the parser recognizes, with its default."""

    document_name: str = "Untitled Document"
    document_type: str = "custom"

    @classmethod
    def from_env(cls) -> "ParseOptions":
        """Build options from MATRIX_DOCUMENT_NAME / MATRIX_DOCUMENT_TYPE."""
        defaults = cls()
        return cls(
            document_name=os.getenv("MATRIX_DOCUMENT_NAME", defaults.document_name),
            document_type=os.getenv("MATRIX_DOCUMENT_TYPE", defaults.document_type),
        )
