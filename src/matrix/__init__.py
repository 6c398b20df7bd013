"""Compliance matrix parsing: structure detection, segmentation and assembly."""

from .models import (
    StructureType,
    DetectedStructure,
    RequirementUnit,
    ParsedRequirement,
    ParseStats,
    ParseResult,
    ParseOptions,
)
from .structure import detect_document_structure
from .segmenter import segment
from .assembler import assemble_requirement
from .matrix_parser import ComplianceMatrixParser, parse_compliance_text, parse_document
from .adapters import import_from_json, export_to_json, generate_template, export_to_csv
from .analysis import analyze_requirement, analyze_requirements, get_category_summary
from .sources import load_document_text

__all__ = [
    "StructureType",
    "DetectedStructure",
    "RequirementUnit",
    "ParsedRequirement",
    "ParseStats",
    "ParseResult",
    "ParseOptions",
    "detect_document_structure",
    "segment",
    "assemble_requirement",
    "ComplianceMatrixParser",
    "parse_compliance_text",
    "parse_document",
    "import_from_json",
    "export_to_json",
    "generate_template",
    "export_to_csv",
    "analyze_requirement",
    "analyze_requirements",
    "get_category_summary",
    "load_document_text",
]
