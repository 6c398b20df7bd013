"""Regex patterns for requirement boundaries and document headers."""

import re
from typing import List

from classifier.patterns import looks_like_reference

# Requirement boundary patterns
PATTERNS = {
    # 1. 2. 3. or 1) 2) 3)
    "numbered": re.compile(r'^(\d+)[.)]\s*'),
    # a. b. c. or a) b) c) or (a) (b) (c)
    "lettered": re.compile(r'^\(?([a-z])[.)]\)?\s*', re.IGNORECASE),
    # i. ii. iii. or (i) (ii) (iii)
    "roman": re.compile(r'^\(?(i{1,3}|iv|vi{0,3}|ix|x)[.)]\)?\s*', re.IGNORECASE),
    "bullet": re.compile(r'^[•●▪◦\-\*]\s*'),
    "question": re.compile(r'\?$'),
}

# Section header shapes
HEADER_PATTERNS = {
    "section": re.compile(r'^(?:section|part|chapter)\s+\d+', re.IGNORECASE),
    # ALL CAPS HEADERS
    "all_caps": re.compile(r'^[A-Z][A-Z\s]{5,}$'),
    # Title Case:
    "title_colon": re.compile(r'^[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*:$'),
    # 1. Introduction
    "numbered_title": re.compile(r'^\d+\.\s+[A-Z]'),
}

# Header shapes counted by the structure detector; looser than HEADER_PATTERNS
HEADER_HINTS = [
    re.compile(r'^section\b', re.IGNORECASE),
    re.compile(r'^\d+\.'),
    # CREW TRAINING: or ALL CAPS lines
    re.compile(r'^[A-Z][A-Z ]+:'),
    HEADER_PATTERNS["all_caps"],
    HEADER_PATTERNS["title_colon"],
]

SUBSECTION_PATTERNS = [
    # 3.2 Crew training
    re.compile(r'^\d+\.\d+\s'),
    # a) Lost link
    re.compile(r'^[a-z]\)\s+[A-Z]'),
]

TITLE_PREFIXES = [
    re.compile(r'^(?:section|part|chapter)\s+\d+[.:]?\s*', re.IGNORECASE),
    re.compile(r'^\d+(?:\.\d+)*[.:]?\s*'),
    re.compile(r'^[a-z]\)\s*'),
]

SEPARATOR_CELL = re.compile(r'^[-=]+$')

TABLE_HEADER_WORDS = [
    "requirement", "description", "reference", "section", "category",
    "response", "evidence", "status", "notes", "item", "reg",
]

# Column roles in a table with a header row
COLUMN_ROLES = {
    "body": re.compile(r'requirement|description|text', re.IGNORECASE),
    "section": re.compile(r'section|category', re.IGNORECASE),
    "reference": re.compile(r'reference|reg|car', re.IGNORECASE),
}

REQUIREMENT_INDICATORS = [
    re.compile(r'shall\b', re.IGNORECASE),
    re.compile(r'must\b', re.IGNORECASE),
    re.compile(r'require', re.IGNORECASE),
    re.compile(r'demonstrate', re.IGNORECASE),
    re.compile(r'provide\b', re.IGNORECASE),
    re.compile(r'describe', re.IGNORECASE),
    re.compile(r'explain', re.IGNORECASE),
    re.compile(r'how\s+(?:do|does|will)\b', re.IGNORECASE),
    re.compile(r'what\s+(?:is|are)\b', re.IGNORECASE),
    PATTERNS["question"],
]

SENTENCE_BOUNDARY = re.compile(r'(?<=[.?])\s+')

# Numbered lines only count as headings when they read like a title
MAX_HEADING_LENGTH = 60


def is_item_start(line: str) -> bool:
    """Check if a line opens a numbered, lettered or bulleted item."""
    return bool(
        PATTERNS["numbered"].match(line)
        or PATTERNS["lettered"].match(line)
        or PATTERNS["bullet"].match(line)
    )


def is_numbered_heading(line: str) -> bool:
    """Check if a numbered line is a short title rather than an obligation.

    "1. Introduction" is a heading, "1. Pilots must hold a certificate." is not.
    """
    return (
        bool(HEADER_PATTERNS["numbered_title"].match(line))
        and len(line) <= MAX_HEADING_LENGTH
        and not re.search(r'[.?!;,]$', line)
    )


def is_section_header(line: str, allow_numbered: bool = False) -> bool:
    """Check if a line is a section header.

    Args:
        line: Trimmed line
        allow_numbered: Treat title-like numbered lines ("2. Crew") as headers
    """
    if (
        HEADER_PATTERNS["section"].match(line)
        or HEADER_PATTERNS["all_caps"].match(line)
        or HEADER_PATTERNS["title_colon"].match(line)
    ):
        return True
    return allow_numbered and is_numbered_heading(line)


def is_subsection_header(line: str) -> bool:
    """Check if a line is a subsection header like "3.2 Crew" or "a) Crew"."""
    return any(pattern.match(line) for pattern in SUBSECTION_PATTERNS)


def extract_section_title(line: str) -> str:
    """Strip numbering and trailing colon from a header line."""
    title = line
    for prefix in TITLE_PREFIXES:
        title = prefix.sub("", title, count=1)
    title = re.sub(r':$', "", title.strip())
    return title.strip() or line.strip()


def clean_requirement_text(line: str) -> str:
    """Remove numbering, lettering and bullets from the start of a line."""
    text = line
    for name in ("numbered", "lettered", "roman", "bullet"):
        text = PATTERNS[name].sub("", text, count=1)
    return text.strip()


def looks_like_header_row(cells: List[str]) -> bool:
    """Check if at least two cells carry table header vocabulary."""
    match_count = sum(
        1 for cell in cells
        if any(word in cell.lower() for word in TABLE_HEADER_WORDS)
    )
    return match_count >= 2


def looks_like_requirement(text: str) -> bool:
    """Check if a sentence reads like an obligation or a question."""
    if looks_like_reference(text):
        return True
    return any(pattern.search(text) for pattern in REQUIREMENT_INDICATORS)


def split_sentences(text: str) -> List[str]:
    """Split on a period or question mark followed by whitespace."""
    return [s.strip() for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def column_roles(header: str) -> List[str]:
    """Roles a header column plays; a column may feed more than one field."""
    return [role for role, pattern in COLUMN_ROLES.items() if pattern.search(header)]


def looks_like_header_hint(line: str) -> bool:
    """Check if a line has any header shape the structure detector counts."""
    return any(pattern.match(line) for pattern in HEADER_HINTS)
