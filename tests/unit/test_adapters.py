"""Unit tests for JSON import/export, templates and CSV export."""

import csv
import io
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from matrix import (
    export_to_csv,
    export_to_json,
    generate_template,
    import_from_json,
    parse_compliance_text,
)


NUMBERED_DOC = "1. Pilot must hold a valid certificate.\n2. CAR 901.54 applies to training records.\n"


@pytest.fixture
def result():
    return parse_compliance_text(NUMBERED_DOC, document_name="SFOC Matrix", document_type="sfoc")


class TestExport:
    """Tests for JSON export."""

    def test_export_shape(self, result):
        exported = export_to_json(result)

        assert exported["name"] == "SFOC Matrix"
        assert exported["type"] == "sfoc"
        assert exported["exportedAt"]
        assert exported["stats"] == {
            "totalRequirements": 2,
            "categorized": 2,
            "uncategorized": 0,
            "withRegRef": 1,
        }

    def test_requirement_fields(self, result):
        second = export_to_json(result)["requirements"][1]

        assert set(second) == {
            "id", "order", "text", "shortText", "section", "regulatoryRef",
            "category", "response", "status", "notes",
        }
        assert second["regulatoryRef"] == "CAR 901.54"
        assert second["category"] == "crew"


class TestImport:
    """Tests for JSON import."""

    def test_round_trip_keeps_user_edits(self, result):
        result.requirements[0].response = "We comply."
        result.requirements[0].status = "complete"
        result.requirements[1].notes = "Check expiry date"

        exported = export_to_json(result)
        reimported = import_from_json(exported)
        again = export_to_json(reimported)

        fields = ("id", "text", "response", "status", "notes")
        for before, after in zip(exported["requirements"], again["requirements"]):
            assert {f: before[f] for f in fields} == {f: after[f] for f in fields}

        assert reimported.document_name == "SFOC Matrix"
        assert reimported.document_type == "sfoc"
        assert reimported.source_exported_at is not None

    def test_round_trip_keeps_sections(self, result):
        reimported = import_from_json(export_to_json(result))

        assert [r.section for r in reimported.requirements] == [None, None]
        assert [r.category for r in reimported.requirements] == ["crew", "crew"]

    def test_explicit_section_wins_over_category(self):
        data = {"requirements": [
            {"text": "Pilots must hold a certificate", "section": "Crew", "category": "crew"},
            {"text": "Pilots must hold a certificate", "section": None, "category": "crew"},
        ]}
        sections = [r.section for r in import_from_json(data).requirements]

        assert sections == ["Crew", None]

    def test_classification_recomputed(self):
        data = {"requirements": [{"text": "Pilots must hold a certificate", "category": "weather"}]}
        req = import_from_json(data).requirements[0]

        assert req.category == "crew"
        assert req.section == "weather"

    def test_alternate_field_names(self):
        data = {
            "items": [{
                "id": "custom-42",
                "description": "Pilots must hold a certificate",
                "reference": "car 901.54",
                "category": "Crew Section",
                "response": "Yes",
                "status": "complete",
                "notes": None,
            }],
        }
        req = import_from_json(data).requirements[0]

        assert req.id == "custom-42"
        assert req.text == "Pilots must hold a certificate"
        assert req.regulatory_ref == "CAR 901.54"
        assert req.section == "Crew Section"
        assert req.response == "Yes"
        assert req.status == "complete"
        assert req.notes == ""

    def test_defaults(self):
        imported = import_from_json({"requirements": []})

        assert imported.document_name == "Imported Document"
        assert imported.document_type == "imported"
        assert imported.requirements == []
        assert imported.source_exported_at is None

    def test_exported_at_parsed(self):
        imported = import_from_json({"exportedAt": "2024-03-01T12:30:00", "requirements": []})
        assert imported.source_exported_at.year == 2024

    def test_bare_list(self):
        imported = import_from_json([{"text": "Pilots must hold a certificate"}])
        assert len(imported.requirements) == 1

    def test_non_object_items_skipped(self):
        data = {"requirements": ["oops", {"text": "Pilots must hold a certificate"}, 42]}
        imported = import_from_json(data)

        assert len(imported.requirements) == 1
        assert imported.requirements[0].order == 1
        assert imported.requirements[0].id == "req-001"
        assert len(imported.warnings) == 2

    def test_requirements_not_a_list(self):
        imported = import_from_json({"requirements": "nope"})

        assert imported.requirements == []
        assert imported.warnings == ["Expected a list of requirements"]

    @pytest.mark.parametrize("data", [None, 42, "text"])
    def test_garbage_input(self, data):
        imported = import_from_json(data)
        assert imported.requirements == []

    def test_uncategorized_counted(self):
        imported = import_from_json([
            {"text": "Lorem ipsum dolor sit amet."},
            {"text": "Pilots must hold a certificate"},
        ])

        assert imported.stats.total_requirements == 2
        assert imported.stats.categorized == 1
        assert imported.stats.uncategorized == 1


class TestTemplate:
    """Tests for template generation."""

    def test_template_shape(self, result):
        template = generate_template(result)

        assert template["id"].startswith("template-")
        assert template["name"] == "SFOC Matrix"
        assert template["documentType"] == "sfoc"
        assert template["description"] == "Template generated from SFOC Matrix"
        assert template["structure"] == {
            "categories": ["crew"],
            "requirementCount": 2,
            "commonRegRefs": ["CAR 901.54"],
        }

    def test_template_has_no_responses(self, result):
        result.requirements[0].response = "We comply."
        template = generate_template(result)

        for req in template["requirements"]:
            assert "response" not in req
            assert "status" not in req
            for evidence in req["suggestedEvidence"]:
                assert set(evidence) == {"id", "name", "description", "sourceTypes"}


class TestCsvExport:
    """Tests for CSV export."""

    def test_header_and_rows(self, result):
        lines = export_to_csv(result).splitlines()

        assert lines[0] == '"Category","Regulatory Ref","Requirement","Status","Response"'
        assert lines[2] == '"Crew","CAR 901.54","CAR 901.54 applies to training records","pending",""'
        assert len(lines) == 3

    def test_quotes_escaped(self, result):
        result.requirements[0].response = 'Pilot said "certified, current"'
        rows = list(csv.reader(io.StringIO(export_to_csv(result))))

        assert rows[1][4] == 'Pilot said "certified, current"'

    def test_uncategorized_has_empty_category(self):
        result = parse_compliance_text("1. Lorem ipsum dolor sit amet.")
        rows = list(csv.reader(io.StringIO(export_to_csv(result))))
        assert rows[1][0] == ""
