from __future__ import annotations

from src.enablement_system.enablement_system.coverage.calculator import CoverageCalculator
from src.enablement_system.enablement_system.features.model import FeatureDefinition
from src.enablement_system.enablement_system.manuals.model import DocumentationSection


def feature(code: str, module: str = "leave", *, active: bool = True) -> FeatureDefinition:
    return FeatureDefinition(code=code, name=code.replace("_", " ").title(), module_code=module, active=active)


def section(section_id: str, codes, *, has_content: bool) -> DocumentationSection:
    return DocumentationSection(
        section_id=section_id,
        section_number=section_id,
        title=f"Section {section_id}",
        manual_code="leave_manual",
        referenced_codes=frozenset(codes),
        has_content=has_content,
    )


def test_reference_without_content_does_not_count():
    registry = [feature("leave_types"), feature("leave_balances")]
    sections = [
        section("1", {"leave_types"}, has_content=True),
        section("2", {"leave_balances"}, has_content=False),
    ]

    report = CoverageCalculator().coverage(registry, sections)

    assert report.total_sections == 2
    assert report.sections_with_content == 1
    assert report.documented_feature_codes == {"leave_types"}
    assert [f.code for f in report.undocumented_features] == ["leave_balances"]
    assert report.coverage_percentage == 50


def test_undocumented_features_carry_suggested_section():
    report = CoverageCalculator().coverage([feature("leave_types")], [])

    only = report.undocumented_features[0]
    assert only.module_code == "leave"
    assert "leave" in only.suggested_section
    assert only.suggested_section


def test_undocumented_list_is_capped_in_input_order():
    registry = [feature(f"f{i:03d}") for i in range(60)]

    report = CoverageCalculator().coverage(registry, [])

    assert len(report.undocumented_features) == 50
    assert report.undocumented_count == 60
    assert [f.code for f in report.undocumented_features] == [f"f{i:03d}" for i in range(50)]


def test_custom_display_limit():
    registry = [feature(f"f{i}") for i in range(5)]

    report = CoverageCalculator(display_limit=2).coverage(registry, [])

    assert [f.code for f in report.undocumented_features] == ["f0", "f1"]


def test_codes_outside_registry_do_not_inflate_coverage():
    registry = [feature("leave_types")]
    sections = [section("1", {"retired_feature"}, has_content=True)]

    report = CoverageCalculator().coverage(registry, sections)

    assert "retired_feature" in report.documented_feature_codes
    assert report.documented_count == 0
    assert report.coverage_percentage == 0


def test_module_breakdown_and_priority_features():
    registry = [feature(f"wf_{i}", "workforce") for i in range(7)] + [feature("leave_types")]
    sections = [section("1", {"wf_0", "leave_types"}, has_content=True)]

    report = CoverageCalculator().coverage(registry, sections)
    modules = {m.module_code: m for m in report.modules}

    workforce = modules["workforce"]
    assert workforce.total == 7
    assert workforce.documented == 1
    assert workforce.gaps == 6
    assert workforce.percentage == 14
    assert workforce.priority_features == ("wf_1", "wf_2", "wf_3", "wf_4", "wf_5")
    assert modules["leave"].percentage == 100
    assert report.coverage_percentage == 25


def test_inactive_features_are_ignored_and_empty_registry_is_zero_percent():
    report = CoverageCalculator().coverage([feature("old", active=False)], [])

    assert report.total_features == 0
    assert report.undocumented_features == ()
    assert report.coverage_percentage == 0
