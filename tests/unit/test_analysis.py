"""Unit tests for requirement analysis and category summaries."""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from matrix import (
    analyze_requirement,
    analyze_requirements,
    get_category_summary,
    parse_compliance_text,
)


SUMMARY_DOC = "\n".join([
    "1. Pilots must hold a valid pilot certificate.",
    "2. Crew training records must be kept.",
    "3. Lorem ipsum dolor sit amet.",
])


@pytest.fixture
def requirements():
    return parse_compliance_text(SUMMARY_DOC).requirements


class TestAnalyzeRequirement:
    """Tests for single requirement analysis."""

    def test_mapping(self, requirements):
        mapping = analyze_requirement(requirements[0])
        assert mapping.primary_category.id == "crew"

    def test_question_pattern_attached(self):
        req = parse_compliance_text("1. Describe the purpose of the operation.").requirements[0]
        mapping = analyze_requirement(req)

        assert mapping.question_pattern.id == "purpose_of_operations"
        assert mapping.primary_category.id == "operations"

    def test_cache_reused(self, requirements):
        cache = {}
        first = analyze_requirement(requirements[0], cache=cache)
        second = analyze_requirement(requirements[0], cache=cache)

        assert second is first
        assert list(cache) == ["req-001"]

    def test_without_cache_recomputes(self, requirements):
        first = analyze_requirement(requirements[0])
        second = analyze_requirement(requirements[0])
        assert second is not first
        assert second == first

    def test_batch(self, requirements):
        cache = {}
        pairs = analyze_requirements(requirements, cache=cache)

        assert [req.id for req, _ in pairs] == ["req-001", "req-002", "req-003"]
        assert len(cache) == 3


class TestCategorySummary:
    """Tests for category summaries."""

    def test_summary(self, requirements):
        summary = get_category_summary(requirements)

        assert [s.id for s in summary] == ["crew", "uncategorized"]
        assert summary[0].name == "Crew"
        assert summary[0].count == 2
        assert summary[0].requirements == ["req-001", "req-002"]
        assert summary[1].name == "Uncategorized"
        assert summary[1].requirements == ["req-003"]

    def test_empty(self):
        assert get_category_summary([]) == []
