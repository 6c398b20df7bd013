"""Unit tests for the compliance matrix parser."""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from matrix import (
    ComplianceMatrixParser,
    ParseOptions,
    StructureType,
    parse_compliance_text,
)


NUMBERED_DOC = "1. Pilot must hold a valid certificate.\n2. CAR 901.54 applies to training records.\n"

TABLE_DOC = "\n".join([
    "Requirement\tReference\tSection",
    "Pilots must hold a certificate\tCAR 901.54\tCrew",
    "----\t----\t----",
    "==\t==\t==",
    "Maintain aircraft records\tCAR 901.48\tEquipment",
])

SECTIONED_DOC = "\n".join([
    "GENERAL PROVISIONS",
    "Operators shall keep flight records for two years.",
    "CREW QUALIFICATIONS",
    "Each pilot must hold a valid advanced certificate.",
    "EMERGENCY PLANNING",
    "Describe lost link procedures for every flight.",
])

MARKETING_DOC = (
    "Our award-winning team delivers stunning aerial imagery for every client. "
    "We love what we do and it shows in every project we deliver."
)

LONG_DOC = "\n".join([
    "1. The operator must maintain a complete maintenance program covering every "
    "component of the aircraft, including batteries, propellers and the C2 link",
    "2. Lorem ipsum dolor sit amet.",
    "3. Describe the purpose of the operation.",
])


@pytest.fixture
def parser():
    return ComplianceMatrixParser()


class TestNumberedDocuments:
    """Tests for numbered list documents."""

    def test_two_requirements(self, parser):
        result = parser.parse(NUMBERED_DOC)

        assert result.detected_structure.type == StructureType.NUMBERED_LIST
        assert len(result.requirements) == 2

        second = result.requirements[1]
        assert second.regulatory_ref == "CAR 901.54"
        assert second.category == "crew"
        assert second.category_name == "Crew"
        assert second.short_text == "CAR 901.54 applies to training records"

    def test_ids_and_defaults(self, parser):
        result = parser.parse(NUMBERED_DOC)
        first = result.requirements[0]

        assert first.id == "req-001"
        assert first.order == 1
        assert first.text == "Pilot must hold a valid certificate."
        assert first.status == "pending"
        assert first.response == ""
        assert first.notes == ""
        assert len(first.suggested_evidence) <= 3
        assert len(first.response_hints) <= 3

    def test_stats(self, parser):
        result = parser.parse(NUMBERED_DOC)

        assert result.stats.total_requirements == 2
        assert result.stats.categorized == 2
        assert result.stats.uncategorized == 0
        assert result.stats.with_reg_ref == 1
        assert result.regulatory_refs == ["CAR 901.54"]
        assert result.categories == {"crew": 2}

    def test_mixed_line_endings(self, parser):
        text = (
            "1. First requirement must be met.\r\n"
            "2. Second requirement must be met.\r"
            "3. Third requirement must be met."
        )
        result = parser.parse(text)
        assert len(result.requirements) == 3


class TestTableDocuments:
    """Tests for tabular documents."""

    def test_reference_and_section_columns(self, parser):
        result = parser.parse(TABLE_DOC)

        assert result.detected_structure.type == StructureType.TABLE
        assert len(result.requirements) == 2
        assert result.requirements[0].regulatory_ref == "CAR 901.54"
        assert result.requirements[0].section == "Crew"
        assert result.requirements[1].regulatory_ref == "CAR 901.48"
        assert result.requirements[1].section == "Equipment"

    def test_column_reference_counts(self, parser):
        result = parser.parse(TABLE_DOC)
        assert result.stats.with_reg_ref == 2
        assert result.regulatory_refs == ["CAR 901.54", "CAR 901.48"]


class TestOtherDocuments:
    """Tests for sectioned, generic and empty documents."""

    def test_sectioned(self, parser):
        result = parser.parse(SECTIONED_DOC)

        assert result.detected_structure.type == StructureType.SECTIONED
        assert [r.section for r in result.requirements] == [
            "GENERAL PROVISIONS", "CREW QUALIFICATIONS", "EMERGENCY PLANNING",
        ]

    def test_marketing_prose_yields_nothing(self, parser):
        result = parser.parse(MARKETING_DOC)

        assert result.detected_structure.type == StructureType.GENERIC
        assert result.requirements == []
        assert result.stats.total_requirements == 0
        assert result.warnings

    @pytest.mark.parametrize("text", ["", "   \n\r\n  ", None])
    def test_empty_input(self, parser, text):
        result = parser.parse(text)

        assert result.requirements == []
        assert result.detected_structure.type == StructureType.GENERIC
        assert result.warnings == ["Document is empty"]

    def test_uncategorized_requirements(self, parser):
        result = parser.parse("1. Lorem ipsum dolor sit amet.\n2. Consectetur adipiscing elit.")

        assert result.stats.uncategorized == 2
        for req in result.requirements:
            assert req.category is None
            assert req.confidence == 0.0
            assert req.suggested_evidence == []


class TestParseInvariants:
    """Properties that hold for every parse result."""

    @pytest.mark.parametrize("text", [
        NUMBERED_DOC, TABLE_DOC, SECTIONED_DOC, MARKETING_DOC, LONG_DOC,
    ])
    def test_invariants(self, parser, text):
        result = parser.parse(text)
        reqs = result.requirements

        assert [r.order for r in reqs] == list(range(1, len(reqs) + 1))
        assert len({r.id for r in reqs}) == len(reqs)
        assert result.stats.total_requirements == len(reqs)
        assert result.stats.categorized + result.stats.uncategorized == len(reqs)
        assert result.stats.categorized == sum(result.categories.values())
        assert len(result.regulatory_refs) == len(set(result.regulatory_refs))

        for req in reqs:
            assert 0.0 <= req.confidence <= 1.0
            prefix = req.short_text.removesuffix("...")
            assert req.text.startswith(prefix)

    def test_long_text_truncated(self, parser):
        result = parser.parse(LONG_DOC)
        short = result.requirements[0].short_text

        assert short.endswith("...")
        assert len(short) <= 80

    def test_reference_raises_confidence(self, parser):
        plain = parser.parse("1. Pilots must hold a valid certificate.")
        cited = parser.parse("1. Pilots must hold a valid certificate per CAR 901.54.")

        assert cited.requirements[0].confidence > plain.requirements[0].confidence


class TestOptions:
    """Tests for parse options."""

    def test_defaults(self):
        result = parse_compliance_text(NUMBERED_DOC)
        assert result.document_name == "Untitled Document"
        assert result.document_type == "custom"
        assert result.parsed_at

    def test_overrides(self):
        options = ParseOptions(document_type="sfoc")
        result = parse_compliance_text(NUMBERED_DOC, options, document_name="SFOC Matrix")
        assert result.document_name == "SFOC Matrix"
        assert result.document_type == "sfoc"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MATRIX_DOCUMENT_NAME", "Env Matrix")
        monkeypatch.setenv("MATRIX_DOCUMENT_TYPE", "checklist")

        options = ParseOptions.from_env()
        assert options.document_name == "Env Matrix"
        assert options.document_type == "checklist"

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("MATRIX_DOCUMENT_NAME", raising=False)
        monkeypatch.delenv("MATRIX_DOCUMENT_TYPE", raising=False)

        options = ParseOptions.from_env()
        assert options.document_name == "Untitled Document"
        assert options.document_type == "custom"
