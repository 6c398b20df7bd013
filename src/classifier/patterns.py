"""Regex patterns for regulatory reference tokens."""

import re
from typing import List, Optional

from utils.text import normalize_reference

# One pattern per reference authority, checked in this order
REFERENCE_PATTERNS = {
    # CAR 901.54, CAR 903.02(d)
    "car": re.compile(
        r'\bCAR\s*\d{3}(?:\.\d{2})?(?:\s*\([a-z]\))?',
        re.IGNORECASE
    ),
    # AC 903-001
    "advisory_circular": re.compile(
        r'\bAC\s*\d{3}-\d{3}',
        re.IGNORECASE
    ),
    # SI 623-001
    "staff_instruction": re.compile(
        r'\bSI\s*\d{3}-\d{3}',
        re.IGNORECASE
    ),
}

# Citation shapes accepted when a requirement carries its own reference.
# Unlike REFERENCE_PATTERNS these allow stacked sub-parts and generic sections.
CITATION_PATTERNS = [
    # CAR 903.01(a)(b)
    re.compile(r'\bCAR\s*\d{3}(?:\.\d{2})?(?:\s*\([a-z]\))*', re.IGNORECASE),
    REFERENCE_PATTERNS["advisory_circular"],
    REFERENCE_PATTERNS["staff_instruction"],
    # Section 3.2, s. 3.2
    re.compile(r'(?:\bSection|\bs\.)\s*\d+(?:\.\d+)*', re.IGNORECASE),
]


def extract_references(text: str) -> List[str]:
    """Extract every reference token, normalized and deduplicated.

    Tokens are collected pattern by pattern, so all CAR references come
    before AC and SI ones; within a pattern the text order is kept.
    """
    refs: List[str] = []

    for pattern in REFERENCE_PATTERNS.values():
        for match in pattern.finditer(text):
            ref = normalize_reference(match.group(0))
            if ref and ref not in refs:
                refs.append(ref)

    return refs

def extract_citation(text: str) -> Optional[str]:
    """Return the first citation found, trying each citation shape in turn."""
    for pattern in CITATION_PATTERNS:
        match = pattern.search(text)
        if match:
            return normalize_reference(match.group(0))
    return None

def looks_like_reference(text: str) -> bool:
    """Check whether text embeds a regulatory-reference-shaped token."""
    return any(pattern.search(text) for pattern in REFERENCE_PATTERNS.values())
