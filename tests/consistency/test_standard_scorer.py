from __future__ import annotations

from src.enablement_system.enablement_system.consistency.model import (
    OrphanedSectionReport,
    UnmappedSectionReport,
    ValidationReport,
)
from src.enablement_system.enablement_system.consistency.scoring.standard_scorer import (
    HealthPolicy,
    StandardHealthScorer,
)
from src.enablement_system.enablement_system.core.enums import HealthStatus, OrphanSeverity


def build_report(*, orphaned: int = 0, unmapped: int = 0, valid: int = 0, critical: bool = False) -> ValidationReport:
    orphans = tuple(
        OrphanedSectionReport(
            section_id=f"o{i}",
            section_number=f"{i}",
            section_title="t",
            manual_code="m",
            orphaned_codes=frozenset({"GONE"}),
            valid_codes=frozenset() if critical else frozenset({"OK"}),
            severity=OrphanSeverity.CRITICAL if critical else OrphanSeverity.WARNING,
        )
        for i in range(orphaned)
    )
    unmapped_rows = tuple(
        UnmappedSectionReport(section_id=f"u{i}", section_number=f"{i}", title="t", manual_code="m")
        for i in range(unmapped)
    )
    return ValidationReport(
        total_sections=orphaned + valid,
        valid_mappings_count=valid,
        orphaned=orphans,
        unmapped=unmapped_rows,
    )


def test_scenario_one_orphan_one_unmapped_is_warning():
    result = StandardHealthScorer().score(build_report(orphaned=1, unmapped=1))

    assert result.health_score == 88
    assert result.status == HealthStatus.WARNING


def test_section_critical_does_not_force_report_critical():
    result = StandardHealthScorer().score(build_report(orphaned=1, critical=True))

    assert result.health_score == 90
    assert result.status == HealthStatus.WARNING


def test_more_than_five_orphans_is_critical_even_with_passing_score():
    result = StandardHealthScorer().score(build_report(orphaned=6, valid=20))

    assert result.health_score == 70
    assert result.status == HealthStatus.CRITICAL


def test_many_unmapped_sections_is_warning():
    result = StandardHealthScorer().score(build_report(unmapped=11, valid=20))

    assert result.health_score == 98
    assert result.status == HealthStatus.WARNING


def test_low_score_is_critical():
    result = StandardHealthScorer().score(build_report(orphaned=5, unmapped=15))

    assert result.health_score == 20
    assert result.status == HealthStatus.CRITICAL


def test_clean_report_is_healthy():
    result = StandardHealthScorer().score(build_report(unmapped=3, valid=5))

    assert result.health_score == 99
    assert result.status == HealthStatus.HEALTHY


def test_score_is_clamped_to_0_100():
    scorer = StandardHealthScorer()
    assert scorer.score(build_report(valid=500)).health_score == 100
    assert scorer.score(build_report(orphaned=1000, unmapped=1000)).health_score == 20

    uncapped = StandardHealthScorer(HealthPolicy(orphan_penalty_cap=10_000, unmapped_penalty_cap=10_000))
    assert uncapped.health_score(orphaned_count=1000, unmapped_count=1000, valid_mappings_count=0) == 0


def test_policy_from_settings_overrides_thresholds():
    policy = HealthPolicy.from_mapping({"critical_orphaned_above": "0", "unknown_key": 3})
    scorer = StandardHealthScorer(policy)

    result = scorer.score(build_report(orphaned=1, valid=20))

    assert policy.warning_score_below == 80
    assert result.status == HealthStatus.CRITICAL


def test_empty_policy_mapping_keeps_defaults():
    assert HealthPolicy.from_mapping({}) == HealthPolicy()
    assert HealthPolicy.from_mapping(None).orphan_penalty_cap == 50
