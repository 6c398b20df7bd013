"""Loading raw document text from files."""

from typing import List, Optional
from pathlib import Path
import logging

from bs4 import BeautifulSoup

from utils.text import normalize_text

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

HTML_SUFFIXES = {".htm", ".html"}
BLOCK_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6", "p", "li", "tr"]


def _list_marker(item) -> str:
    """Number for an ordered list item ("3."), a dash otherwise."""
    parent = item.find_parent(["ol", "ul"])
    if parent is not None and parent.name == "ol":
        return f"{len(item.find_previous_siblings('li')) + 1}."
    return "-"


def html_to_lines(content: str) -> List[str]:
    """Extract one line per block element from an HTML document.

    Table rows become tab-delimited lines so the table strategy can pick
    them up, and list items keep a number or bullet marker. Paragraphs
    inside tables, and list items that wrap paragraphs, are skipped to
    avoid emitting the same text twice.
    """
    soup = BeautifulSoup(content, 'lxml')
    lines = []

    for element in soup.find_all(BLOCK_TAGS):
        if element.name == "tr":
            cells = [
                normalize_text(cell.get_text(separator=' '))
                for cell in element.find_all(['th', 'td'])
            ]
            line = "\t".join(cells)
        else:
            if element.find_parent("table") is not None:
                continue
            if element.name == "li" and element.find("p") is not None:
                continue
            line = normalize_text(element.get_text(separator=' '))
            if element.name == "li" and line:
                line = f"{_list_marker(element)} {line}"

        if line.strip():
            lines.append(line)

    if not lines:
        # No block markup; fall back to the raw text
        text = soup.get_text(separator='\n', strip=True)
        lines = [line for line in text.split('\n') if line.strip()]

    return lines


def load_document_text(filepath: str | Path) -> Optional[str]:
    """Read a document as raw text ready for parsing.

    HTML files are flattened through BeautifulSoup; anything else is read
    as UTF-8 text.

    Returns:
        Document text, or None if the file could not be read
    """
    filepath = Path(filepath)

    try:
        content = filepath.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading {filepath}: {e}")
        return None

    if filepath.suffix.lower() in HTML_SUFFIXES:
        lines = html_to_lines(content)
        logger.info(f"Found {len(lines)} text blocks in {filepath.name}")
        return "\n".join(lines)

    return content
