"""Structure detection for compliance documents.

Counts line shapes and picks a layout with a fixed priority order:

1. numbered prefixes on more than 30% of lines   -> numbered-list
2. tabs or pipes on more than 50% of lines        -> table
3. bullet prefixes on more than 30% of lines      -> numbered-list (bullet)
4. more than 2 header-shaped lines                -> sectioned
5. anything else                                  -> generic, confidence 0

A document that trips several thresholds takes the first one in this order.
"""

from typing import List

from .models import DetectedStructure, StructureType
from .patterns import PATTERNS, looks_like_header_hint

NUMBERED_THRESHOLD = 0.3
TABLE_THRESHOLD = 0.5
BULLET_THRESHOLD = 0.3
MIN_SECTION_HEADERS = 3


def is_table_row(line: str) -> bool:
    return "\t" in line or "|" in line


def detect_document_structure(lines: List[str]) -> DetectedStructure:
    """Detect the structure type of a document.

    Args:
        lines: Trimmed, non-blank document lines

    Returns:
        DetectedStructure with type, confidence and strategy details
    """
    total_lines = len(lines)
    if total_lines == 0:
        return DetectedStructure()

    numbered_count = sum(1 for line in lines if PATTERNS["numbered"].match(line))
    bullet_count = sum(1 for line in lines if PATTERNS["bullet"].match(line))
    table_count = sum(1 for line in lines if is_table_row(line))

    if numbered_count > total_lines * NUMBERED_THRESHOLD:
        return DetectedStructure(
            type=StructureType.NUMBERED_LIST,
            confidence=numbered_count / total_lines,
            details={"pattern": "numbered"},
        )

    if table_count > total_lines * TABLE_THRESHOLD:
        return DetectedStructure(
            type=StructureType.TABLE,
            confidence=table_count / total_lines,
            details={"delimiter": "|" if "|" in lines[0] else "\t"},
        )

    if bullet_count > total_lines * BULLET_THRESHOLD:
        return DetectedStructure(
            type=StructureType.NUMBERED_LIST,
            confidence=bullet_count / total_lines,
            details={"pattern": "bullet"},
        )

    headers = [line for line in lines if looks_like_header_hint(line)]
    if len(headers) >= MIN_SECTION_HEADERS:
        return DetectedStructure(
            type=StructureType.SECTIONED,
            confidence=len(headers) / total_lines,
            details={"headers": headers},
        )

    return DetectedStructure(type=StructureType.GENERIC, confidence=0.0)
