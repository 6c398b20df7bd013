"""Pydantic models for the static compliance reference library."""

from typing import Optional, List, Dict
from pydantic import BaseModel, Field


class SubPart(BaseModel):
    """Nested guidance for one lettered sub-part of a regulation."""

    topic: Optional[str] = None
    description: str

    class Config:
        frozen = True


class RegulatoryReference(BaseModel):
    """A citable regulation, advisory circular or staff instruction."""

    id: str  # Normalized identifier like "CAR 903.02"
    title: str
    description: str
    category: str  # Owning ComplianceCategory id
    topics: List[str] = Field(default_factory=list)
    sub_parts: Optional[Dict[str, SubPart]] = None  # "d" -> SubPart
    evidence_types: Optional[List[str]] = None

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "CAR 901.54",
                "title": "Pilot Certificate - Advanced",
                "description": "Advanced RPAS pilot certificate requirements",
                "category": "crew",
                "topics": ["pilot certification", "qualifications", "training"],
                "evidence_types": ["pilot certificate", "training records", "recency"],
            }
        }


class ResolvedReference(RegulatoryReference):
    """A reference resolved through the sub-part lookup path."""

    sub_part: Optional[str] = None
    sub_part_info: Optional[SubPart] = Field(default=None, serialization_alias="subPartInfo")


class ComplianceCategory(BaseModel):
    """A category of obligation that recurs across compliance frameworks."""

    id: str
    name: str
    description: str
    keywords: List[str]  # Lowercase, scored by substring match
    typical_requirements: List[str] = Field(default_factory=list)
    evidence_types: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class EvidencePattern(BaseModel):
    """A kind of supporting document and what it typically satisfies."""

    id: str
    name: str
    description: str
    keywords: List[str]
    satisfies: List[str] = Field(default_factory=list)  # Category or reference ids
    source_types: List[str] = Field(default_factory=list)  # "policy", "upload", ...

    class Config:
        frozen = True


class EvidenceSuggestion(BaseModel):
    """Evidence projection attached to a parsed requirement."""

    id: str
    name: str
    description: str
    source_types: List[str] = Field(default_factory=list)


class QuestionPattern(BaseModel):
    """Phrases that identify the same question asked by different frameworks."""

    id: str
    patterns: List[str]
    category: str
    regulatory_ref: Optional[str] = None
    evidence_type: Optional[str] = None

    class Config:
        frozen = True
