"""Text processing utilities."""

import re
import unicodedata
from typing import List, Optional

SHORT_TEXT_LIMIT = 80
TRUNCATE_AT = 77


def normalize_text(text: str) -> str:
    """Normalize text by removing extra whitespace and normalizing unicode.

    Args:
        text: Text to normalize

    Returns:
        Normalized text
    """
    if not text:
        return ""

    # Normalize unicode
    text = unicodedata.normalize("NFKC", text)

    # Replace multiple whitespace with single space
    text = re.sub(r"\s+", " ", text)

    return text.strip()


def split_lines(raw_text: str) -> List[str]:
    """Split pasted text into trimmed, non-blank lines.

    Handles ``\\r\\n``, ``\\r`` and ``\\n`` line endings.

    Args:
        raw_text: Text as pasted or extracted from a document

    Returns:
        Lines with surrounding whitespace removed, blanks dropped
    """
    if not raw_text:
        return []

    text = raw_text.replace("\r\n", "\n").replace("\r", "\n")
    return [line.strip() for line in text.split("\n") if line.strip()]


def normalize_reference(ref: Optional[str]) -> Optional[str]:
    """Uppercase a regulatory reference and collapse internal whitespace.

    "car  903.02(d)" becomes "CAR 903.02(D)". Blank input gives None.
    """
    if not ref or not ref.strip():
        return None

    return re.sub(r"\s+", " ", ref.strip()).upper()


def generate_short_text(text: str) -> str:
    """Summarize requirement text for list views.

    Uses the first sentence when it fits in 80 characters, otherwise
    truncates at the last word boundary before 77 characters and appends
    an ellipsis. A period inside a token ("901.54") does not end a sentence.

    Args:
        text: Full requirement text

    Returns:
        Short text that is always drawn from the start of ``text``
    """
    if not text:
        return ""

    first_sentence = re.split(r"[.?!](?=\s|$)", text, maxsplit=1)[0].strip()
    if first_sentence and len(first_sentence) <= SHORT_TEXT_LIMIT:
        return first_sentence

    truncated = text[:TRUNCATE_AT]
    last_space = truncated.rfind(" ")
    if last_space > 0:
        truncated = truncated[:last_space]

    return truncated.rstrip() + "..."


def slugify(text: str) -> str:
    """Convert text to URL-safe slug.

    Args:
        text: Text to slugify

    Returns:
        URL-safe slug
    """
    # Normalize unicode and convert to ASCII
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")

    # Convert to lowercase
    text = text.lower()

    # Replace non-alphanumeric with hyphens
    text = re.sub(r"[^a-z0-9]+", "-", text)

    # Remove leading/trailing hyphens
    text = text.strip("-")

    return text
