"""Requirement segmentation strategies, one per structure type.

Every strategy takes trimmed, non-blank lines and returns RequirementUnits in
document order. None of them raise on odd input; a document with nothing
recognizable simply yields an empty list.
"""

from typing import Callable, Dict, List, Optional

from .models import DetectedStructure, RequirementUnit, StructureType
from .patterns import (
    PATTERNS,
    SEPARATOR_CELL,
    clean_requirement_text,
    column_roles,
    extract_section_title,
    is_item_start,
    is_section_header,
    is_subsection_header,
    looks_like_header_row,
    looks_like_requirement,
    split_sentences,
)

HEADER_SCAN_LINES = 5
MIN_CELL_LENGTH = 20
MIN_BUFFER_LENGTH = 20
MIN_SENTENCE_LENGTH = 30


def parse_numbered_list(lines: List[str], structure: DetectedStructure) -> List[RequirementUnit]:
    """Split a numbered or bulleted list into one unit per item.

    Header lines set the section for the items that follow. Lines that do not
    open a new item are continuations of the open one.
    """
    units: List[RequirementUnit] = []
    current: Optional[RequirementUnit] = None
    current_section: Optional[str] = None

    for line in lines:
        if is_section_header(line):
            current_section = extract_section_title(line)
            continue

        if is_item_start(line):
            if current:
                units.append(current)
            current = RequirementUnit(
                raw_text=clean_requirement_text(line),
                section=current_section,
            )
        elif current:
            current.continuations.append(line)

    if current:
        units.append(current)

    return units


def split_row(line: str, delimiter: str) -> List[str]:
    """Split a delimited row into trimmed cells.

    Markdown-style rows ("| a | b |") lose their empty outer cells.
    """
    row = line.strip()
    if delimiter == "|":
        if row.startswith("|"):
            row = row[1:]
        if row.endswith("|"):
            row = row[:-1]
    return [cell.strip() for cell in row.split(delimiter)]


def parse_table_format(lines: List[str], structure: DetectedStructure) -> List[RequirementUnit]:
    """Turn delimited rows into units, using a header row when one is found.

    The header row is searched for in the first five lines only. Without it,
    the longest cell over 20 characters becomes the requirement body.
    """
    delimiter = structure.details.get("delimiter") or "\t"
    units: List[RequirementUnit] = []

    header_row: Optional[List[str]] = None
    data_start = 0

    for i, line in enumerate(lines[:HEADER_SCAN_LINES]):
        cells = split_row(line, delimiter)
        if looks_like_header_row(cells):
            header_row = cells
            data_start = i + 1
            break

    for line in lines[data_start:]:
        cells = split_row(line, delimiter)
        if len(cells) < 2:
            continue

        # ---- or ==== rows
        if all(SEPARATOR_CELL.match(cell) for cell in cells):
            continue

        unit = RequirementUnit(raw_text="")

        if header_row:
            for j, header_cell in enumerate(header_row):
                header = header_cell.lower()
                value = cells[j] if j < len(cells) else ""
                unit.cells[header] = value

                roles = column_roles(header)
                if "body" in roles:
                    unit.raw_text = value
                if "section" in roles:
                    unit.section = value or None
                if "reference" in roles:
                    unit.regulatory_ref = value or None
        else:
            unit.raw_text = max(
                (cell for cell in cells if len(cell) > MIN_CELL_LENGTH),
                key=len,
                default=" ".join(cells),
            )

        if unit.raw_text:
            units.append(unit)

    return units


def parse_sectioned_document(lines: List[str], structure: DetectedStructure) -> List[RequirementUnit]:
    """Accumulate prose under the current section and subsection.

    The buffer is flushed whenever a header, subheader or numbered line starts,
    and at the end. Buffers of 20 characters or less are dropped as noise.
    """
    units: List[RequirementUnit] = []
    current_section: Optional[str] = None
    current_subsection: Optional[str] = None
    buffer: List[str] = []

    def flush():
        if buffer:
            text = " ".join(buffer).strip()
            if len(text) > MIN_BUFFER_LENGTH:
                units.append(RequirementUnit(
                    raw_text=text,
                    section=current_section,
                    subsection=current_subsection,
                ))
            buffer.clear()

    for line in lines:
        if is_section_header(line, allow_numbered=True):
            flush()
            current_section = extract_section_title(line)
            current_subsection = None
        elif is_subsection_header(line):
            flush()
            current_subsection = extract_section_title(line)
        elif PATTERNS["numbered"].match(line) or PATTERNS["lettered"].match(line):
            flush()
            buffer.append(clean_requirement_text(line))
        else:
            buffer.append(line)

    flush()
    return units


def parse_generic_text(lines: List[str], structure: DetectedStructure) -> List[RequirementUnit]:
    """Fallback: keep sentences that read like obligations or questions."""
    text = " ".join(lines)

    return [
        RequirementUnit(raw_text=sentence)
        for sentence in split_sentences(text)
        if len(sentence) > MIN_SENTENCE_LENGTH and looks_like_requirement(sentence)
    ]


Strategy = Callable[[List[str], DetectedStructure], List[RequirementUnit]]

STRATEGIES: Dict[StructureType, Strategy] = {
    StructureType.NUMBERED_LIST: parse_numbered_list,
    StructureType.TABLE: parse_table_format,
    StructureType.SECTIONED: parse_sectioned_document,
    StructureType.GENERIC: parse_generic_text,
}

_unbound = set(StructureType) - set(STRATEGIES)
if _unbound:
    raise RuntimeError(f"No segmentation strategy for: {sorted(t.value for t in _unbound)}")


def segment(lines: List[str], structure: DetectedStructure) -> List[RequirementUnit]:
    """Split lines into requirement units with the strategy for the structure."""
    return STRATEGIES[structure.type](lines, structure)
