"""Compliance matrix parser: raw text in, classified requirements out."""

from typing import Optional
from pathlib import Path
import json
import logging

from utils.dates import now_iso
from utils.text import split_lines

from .adapters import export_to_json
from .assembler import assemble_requirement, record_requirement
from .models import ParseOptions, ParseResult
from .segmenter import segment
from .sources import load_document_text
from .structure import detect_document_structure

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ComplianceMatrixParser:
    """Parser for pasted compliance matrices, checklists and questionnaires."""

    def __init__(self, options: Optional[ParseOptions] = None):
        self.options = options or ParseOptions()

    def parse(self, raw_text: str) -> ParseResult:
        """Parse raw text into structured requirements.

        Args:
            raw_text: Text with any mix of \\n, \\r\\n or \\r line endings

        Returns:
            ParseResult; an empty requirement list means nothing was extracted
        """
        result = ParseResult(
            document_name=self.options.document_name,
            document_type=self.options.document_type,
            parsed_at=now_iso(),
        )

        lines = split_lines(raw_text or "")
        if not lines:
            result.warnings.append("Document is empty")
            logger.warning(f"Nothing to parse in {self.options.document_name!r}")
            return result

        structure = detect_document_structure(lines)
        result.detected_structure = structure
        logger.info(
            f"Detected {structure.type.value} structure "
            f"(confidence {structure.confidence:.2f}) in {len(lines)} lines"
        )

        units = segment(lines, structure)

        for order, unit in enumerate(units, start=1):
            record_requirement(result, assemble_requirement(unit, order))

        if not result.requirements:
            result.warnings.append(
                "No requirements found; try pasting the document in a different format"
            )

        logger.info(f"Parsing complete: {result.stats.model_dump()}")

        return result

    def parse_file(self, filepath: str | Path) -> Optional[ParseResult]:
        """Parse a text or HTML document from disk."""
        filepath = Path(filepath)
        logger.info(f"Parsing: {filepath}")

        raw_text = load_document_text(filepath)
        if raw_text is None:
            return None

        return self.parse(raw_text)


def parse_compliance_text(
    raw_text: str,
    options: Optional[ParseOptions] = None,
    **overrides,
) -> ParseResult:
    """Parse raw text with the given options.

    Keyword overrides (``document_name``, ``document_type``) are applied on
    top of ``options``.
    """
    options = options or ParseOptions()
    if overrides:
        options = ParseOptions(**{**options.model_dump(), **overrides})
    return ComplianceMatrixParser(options).parse(raw_text)


def parse_document(
    input_file: str | Path,
    output_file: str | Path,
    options: Optional[ParseOptions] = None,
) -> Optional[ParseResult]:
    """Parse a document and save its JSON export."""
    options = options or ParseOptions(document_name=Path(input_file).stem)
    result = ComplianceMatrixParser(options).parse_file(input_file)
    if result is None:
        return None

    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(export_to_json(result), f, ensure_ascii=False, indent=2)

    logger.info(f"Saved {result.stats.total_requirements} requirements to {output_path}")

    return result
