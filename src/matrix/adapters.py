"""Import, export and template projections of parse results.

The JSON shapes use camelCase keys so they can be exchanged with the
consuming application as-is. Classification is never trusted on import:
every item is re-run through the assembler, while user edits (id,
response, status, notes) are carried over untouched.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional
import csv
import io
import logging

from reference.library import COMPLIANCE_CATEGORIES
from utils.dates import epoch_millis, now_iso, parse_timestamp

from .assembler import assemble_requirement, record_requirement
from .models import ParsedRequirement, ParseResult, ParseStats, RequirementUnit

logger = logging.getLogger(__name__)

PRESERVED_FIELDS = ("id", "response", "status", "notes")
CSV_HEADERS = ["Category", "Regulatory Ref", "Requirement", "Status", "Response"]


def _first(item: Mapping, *keys: str) -> Optional[str]:
    """First truthy value among the given keys, as a string."""
    for key in keys:
        value = item.get(key)
        if value:
            return str(value)
    return None


def _stats_to_json(stats: ParseStats) -> Dict[str, int]:
    return {
        "totalRequirements": stats.total_requirements,
        "categorized": stats.categorized,
        "uncategorized": stats.uncategorized,
        "withRegRef": stats.with_reg_ref,
    }


def import_from_json(data: Any) -> ParseResult:
    """Rebuild a parse result from exported or hand-written JSON.

    Args:
        data: Mapping with ``requirements`` (or ``items``); a bare list of
            items is accepted too

    Returns:
        ParseResult with freshly computed classification
    """
    if isinstance(data, list):
        data = {"requirements": data}
    elif not isinstance(data, Mapping):
        data = {}

    result = ParseResult(
        document_name=str(data.get("name") or "Imported Document"),
        document_type=str(data.get("type") or "imported"),
        parsed_at=now_iso(),
        source_exported_at=parse_timestamp(data.get("exportedAt")),
    )

    items = data.get("requirements") or data.get("items") or []
    if not isinstance(items, list):
        result.warnings.append("Expected a list of requirements")
        logger.warning(f"Ignoring requirements of type {type(items).__name__}")
        items = []

    order = 0
    for index, item in enumerate(items, start=1):
        if not isinstance(item, Mapping):
            result.warnings.append(f"Skipped item {index}: not an object")
            logger.warning(f"Skipped import item {index} of type {type(item).__name__}")
            continue

        order += 1
        text = _first(item, "text", "description", "requirement") or ""
        if not text:
            result.warnings.append(f"Item {index} has no requirement text")

        unit = RequirementUnit(
            raw_text=text,
            section=_first(item, "section") if "section" in item else _first(item, "category"),
            regulatory_ref=_first(item, "regulatoryRef", "reference"),
        )
        requirement = assemble_requirement(unit, order)

        for field in PRESERVED_FIELDS:
            value = item.get(field)
            if value is not None:
                setattr(requirement, field, str(value))

        record_requirement(result, requirement)

    logger.info(f"Imported {result.stats.total_requirements} requirements into {result.document_name!r}")

    return result


def _requirement_to_json(req: ParsedRequirement) -> Dict[str, Any]:
    return {
        "id": req.id,
        "order": req.order,
        "text": req.text,
        "shortText": req.short_text,
        "section": req.section,
        "regulatoryRef": req.regulatory_ref,
        "category": req.category,
        "response": req.response,
        "status": req.status,
        "notes": req.notes,
    }


def export_to_json(result: ParseResult) -> Dict[str, Any]:
    """Export a parse result to its portable JSON form."""
    return {
        "name": result.document_name,
        "type": result.document_type,
        "exportedAt": now_iso(),
        "stats": _stats_to_json(result.stats),
        "requirements": [_requirement_to_json(req) for req in result.requirements],
    }


def generate_template(result: ParseResult) -> Dict[str, Any]:
    """Project a parse result into a reusable, response-free template."""
    return {
        "id": f"template-{epoch_millis()}",
        "name": result.document_name,
        "description": f"Template generated from {result.document_name}",
        "documentType": result.document_type,
        "createdAt": now_iso(),
        "stats": _stats_to_json(result.stats),
        "structure": {
            "categories": list(result.categories.keys()),
            "requirementCount": result.stats.total_requirements,
            "commonRegRefs": list(result.regulatory_refs),
        },
        "requirements": [
            {
                "id": req.id,
                "order": req.order,
                "text": req.text,
                "shortText": req.short_text,
                "section": req.section,
                "regulatoryRef": req.regulatory_ref,
                "category": req.category,
                "suggestedEvidence": [
                    {
                        "id": evidence.id,
                        "name": evidence.name,
                        "description": evidence.description,
                        "sourceTypes": list(evidence.source_types),
                    }
                    for evidence in req.suggested_evidence
                ],
                "responseHints": list(req.response_hints),
            }
            for req in result.requirements
        ],
    }


def export_to_csv(result: ParseResult) -> str:
    """Export requirements as CSV, one quoted row per requirement."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)

    rows: List[List[str]] = []
    for req in sorted(result.requirements, key=lambda r: r.order):
        category = COMPLIANCE_CATEGORIES.get(req.category) if req.category else None
        rows.append([
            category.name if category else (req.category or ""),
            req.regulatory_ref or "",
            req.short_text or req.text,
            req.status,
            req.response,
        ])

    writer.writerows(rows)
    return buffer.getvalue()
