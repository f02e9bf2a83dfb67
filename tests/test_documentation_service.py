from __future__ import annotations

from typing import Optional

from src.enablement_system.enablement_system.core.enums import HealthStatus
from src.enablement_system.enablement_system.enablement.service import DocumentationHealthService
from src.enablement_system.enablement_system.features.model import FeatureDefinition
from src.enablement_system.enablement_system.features.reader import RegistryReader
from src.enablement_system.enablement_system.manuals.model import DocumentationSection
from src.enablement_system.enablement_system.manuals.reader import CorpusReader
from src.enablement_system.enablement_system.remediation.service import RemediationService


class InMemoryFeatures:
    def __init__(self, features):
        self.features = list(features)
        self.fail = False

    def list_active_features(self):
        if self.fail:
            raise ConnectionError("registry unavailable")
        return list(self.features)


class InMemorySections:
    def __init__(self, sections):
        self._by_id = {s.section_id: s for s in sections}
        self.fail_writes = False

    def list_sections_with_references(self):
        # Mirrors the SQL: NOT NULL arrays, which includes stored empty arrays.
        return list(self._by_id.values())

    def list_unmapped_sections(self):
        return [s for s in self._by_id.values() if not s.referenced_codes]

    def get_section(self, section_id: str) -> Optional[DocumentationSection]:
        return self._by_id.get(section_id)

    def update_section_references(self, section_id, codes, *, expected_version=None):
        if self.fail_writes:
            raise RuntimeError("deadlock")
        current = self._by_id.get(section_id)
        if not current:
            return False
        self._by_id[section_id] = current.with_references(codes)
        return True


def build_service(features=None, sections=None):
    features_repo = InMemoryFeatures(
        features
        if features is not None
        else [
            FeatureDefinition(code="F1", name="Feature 1", module_code="core"),
            FeatureDefinition(code="F2", name="Feature 2", module_code="core"),
        ]
    )
    sections_repo = InMemorySections(
        sections
        if sections is not None
        else [
            DocumentationSection("1", "1.1", "One", "manual", frozenset({"F1", "F3"}), has_content=True),
            DocumentationSection("2", "1.2", "Two", "manual", frozenset(), has_content=False),
        ]
    )
    svc = DocumentationHealthService(
        RegistryReader(features_repo),
        CorpusReader(sections_repo),
        RemediationService(sections_repo),
    )
    return svc, features_repo, sections_repo


def test_validate_documentation_end_to_end():
    svc, _, _ = build_service()

    result = svc.validate_documentation()

    assert result.ok
    report = result.value
    assert report.total_sections == 1
    assert [u.section_id for u in report.unmapped] == ["2"]
    assert report.summary.health_score == 88
    assert svc.last_report is report


def test_health_reports_score_and_status():
    svc, _, _ = build_service()

    result = svc.get_documentation_health()

    assert result.ok
    assert result.value.health_score == 88
    assert result.value.status == HealthStatus.WARNING
    assert "warning" in result.message


def test_fetch_failure_keeps_previous_report_and_does_not_raise():
    svc, features_repo, _ = build_service()
    first = svc.validate_documentation().value

    features_repo.fail = True
    result = svc.validate_documentation()

    assert not result.ok
    assert result.error_type == "FetchError"
    assert result.value is None
    assert result.message
    assert svc.last_report is first


def test_health_failure_is_reported_not_raised():
    svc, features_repo, _ = build_service()
    features_repo.fail = True

    result = svc.get_documentation_health()

    assert not result.ok
    assert result.error_type == "FetchError"


def test_remediation_marks_report_stale_until_revalidated():
    svc, _, _ = build_service()
    svc.validate_documentation()

    result = svc.remove_orphaned_codes("1", ["F3"])

    assert result.ok
    assert svc.is_report_stale
    assert svc.last_report.orphaned_count == 1

    refreshed = svc.validate_documentation().value
    assert not svc.is_report_stale
    assert refreshed.orphaned_count == 0
    assert refreshed.valid_mappings_count == 1


def test_noop_remediation_leaves_report_fresh():
    svc, _, _ = build_service()
    svc.validate_documentation()

    result = svc.link_features_to_section("1", ["F1"])

    assert result.ok
    assert not result.value.changed
    assert not svc.is_report_stale


def test_persistence_failure_surfaces_section_and_operation():
    svc, _, sections_repo = build_service()
    sections_repo.fail_writes = True

    result = svc.link_features_to_section("1", ["F2"])

    assert not result.ok
    assert result.error_type == "PersistenceError"
    assert "1" in result.message
    assert "link_features_to_section" in result.message


def test_invalid_codes_are_reported_as_validation_errors():
    svc, _, _ = build_service()

    result = svc.remove_orphaned_codes("1", [1, 2])

    assert not result.ok
    assert result.error_type == "ValidationError"


def test_coverage_uses_only_sections_with_content():
    features = [
        FeatureDefinition(code="F1", name="Feature 1", module_code="core"),
        FeatureDefinition(code="F2", name="Feature 2", module_code="core"),
    ]
    sections = [
        DocumentationSection("1", "1.1", "One", "manual", frozenset({"F1"}), has_content=True),
        DocumentationSection("2", "1.2", "Two", "manual", frozenset({"F2"}), has_content=False),
        DocumentationSection("3", "1.3", "Three", "manual", frozenset(), has_content=True),
    ]
    svc, _, _ = build_service(features, sections)

    result = svc.calculate_manual_coverage()

    assert result.ok
    assert result.value.total_sections == 3
    assert result.value.sections_with_content == 2
    assert [f.code for f in result.value.undocumented_features] == ["F2"]
