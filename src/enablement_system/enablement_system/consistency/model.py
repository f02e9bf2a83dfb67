from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import ORPHAN_ACTION_REQUIRED
from ..core.enums import HealthStatus, OrphanSeverity


@dataclass(frozen=True)
class OrphanedSectionReport:
    """A mapped section citing at least one code missing from the registry."""

    section_id: str
    section_number: str
    section_title: str
    manual_code: str
    orphaned_codes: frozenset[str]
    valid_codes: frozenset[str]
    severity: OrphanSeverity
    action_required: str = ORPHAN_ACTION_REQUIRED

    def to_dict(self) -> dict:
        return {
            "section_id": self.section_id,
            "section_number": self.section_number,
            "section_title": self.section_title,
            "manual_code": self.manual_code,
            "orphaned_codes": sorted(self.orphaned_codes),
            "valid_codes": sorted(self.valid_codes),
            "severity": self.severity.value,
            "action_required": self.action_required,
        }


@dataclass(frozen=True)
class UnmappedSectionReport:
    section_id: str
    section_number: str
    title: str
    manual_code: str

    def to_dict(self) -> dict:
        return {
            "section_id": self.section_id,
            "section_number": self.section_number,
            "title": self.title,
            "manual_code": self.manual_code,
        }


@dataclass(frozen=True)
class ValidMapping:
    section_number: str
    feature_codes: frozenset[str]

    def to_dict(self) -> dict:
        return {"section_number": self.section_number, "feature_codes": sorted(self.feature_codes)}


@dataclass(frozen=True)
class ValidationSummary:
    orphaned_count: int
    unmapped_count: int
    health_score: int

    def to_dict(self) -> dict:
        return {
            "orphaned_count": self.orphaned_count,
            "unmapped_count": self.unmapped_count,
            "health_score": self.health_score,
        }


@dataclass(frozen=True)
class ValidationReport:
    """Read-model produced by ConsistencyValidator.

    `total_sections` counts mapped sections only; no ordering is guaranteed
    on the lists.
    """

    total_sections: int
    valid_mappings_count: int
    orphaned: tuple[OrphanedSectionReport, ...] = ()
    unmapped: tuple[UnmappedSectionReport, ...] = ()
    valid_mappings: tuple[ValidMapping, ...] = ()
    summary: Optional[ValidationSummary] = None

    @property
    def orphaned_count(self) -> int:
        return len(self.orphaned)

    @property
    def unmapped_count(self) -> int:
        return len(self.unmapped)

    def to_dict(self, *, limit: Optional[int] = None) -> dict:
        orphaned = self.orphaned if limit is None else self.orphaned[:limit]
        unmapped = self.unmapped if limit is None else self.unmapped[:limit]
        return {
            "total_sections": self.total_sections,
            "valid_mappings": self.valid_mappings_count,
            "orphaned_documentation": [o.to_dict() for o in orphaned],
            "unmapped_sections": [u.to_dict() for u in unmapped],
            "summary": self.summary.to_dict() if self.summary else None,
        }


@dataclass(frozen=True)
class HealthAssessment:
    health_score: int
    status: HealthStatus
    orphaned_count: int = 0
    unmapped_count: int = 0
    valid_mappings_count: int = 0

    def to_dict(self) -> dict:
        return {
            "health_score": self.health_score,
            "status": self.status.value,
            "orphaned_count": self.orphaned_count,
            "unmapped_count": self.unmapped_count,
            "valid_mappings_count": self.valid_mappings_count,
        }
