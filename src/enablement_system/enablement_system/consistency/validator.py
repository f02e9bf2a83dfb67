from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Union

from ..core.enums import OrphanSeverity
from ..features.model import FeatureDefinition
from ..manuals.model import DocumentationSection
from .model import (
    OrphanedSectionReport,
    UnmappedSectionReport,
    ValidationReport,
    ValidationSummary,
    ValidMapping,
)
from .scoring.base import HealthScorer
from .scoring.standard_scorer import StandardHealthScorer

RegistryInput = Iterable[Union[str, FeatureDefinition]]


def ground_truth(registry: RegistryInput) -> frozenset[str]:
    """Active feature codes; inactive definitions are treated as absent."""
    codes: set[str] = set()
    for entry in registry:
        if isinstance(entry, FeatureDefinition):
            if entry.active:
                codes.add(entry.code)
        else:
            codes.add(str(entry))
    return frozenset(codes)


class ConsistencyValidator:
    """Reconciles documentation references against the feature registry.

    Mapped sections are partitioned into orphaned/valid codes; sections with
    no references are reported as unmapped and never as orphaned.
    """

    def __init__(self, scorer: Optional[HealthScorer] = None):
        self._scorer = scorer or StandardHealthScorer()

    def validate(self, registry: RegistryInput, sections: Iterable[DocumentationSection]) -> ValidationReport:
        known = ground_truth(registry)

        orphaned: list[OrphanedSectionReport] = []
        unmapped: list[UnmappedSectionReport] = []
        valid_mappings: list[ValidMapping] = []
        total_sections = 0

        for section in sections:
            codes = frozenset(section.referenced_codes)
            if not codes:
                unmapped.append(
                    UnmappedSectionReport(
                        section_id=section.section_id,
                        section_number=section.section_number,
                        title=section.title,
                        manual_code=section.manual_code,
                    )
                )
                continue

            total_sections += 1
            valid_codes = codes & known
            orphaned_codes = codes - known

            if orphaned_codes:
                orphaned.append(
                    OrphanedSectionReport(
                        section_id=section.section_id,
                        section_number=section.section_number,
                        section_title=section.title,
                        manual_code=section.manual_code,
                        orphaned_codes=orphaned_codes,
                        valid_codes=valid_codes,
                        severity=OrphanSeverity.CRITICAL if not valid_codes else OrphanSeverity.WARNING,
                    )
                )
            else:
                valid_mappings.append(ValidMapping(section_number=section.section_number, feature_codes=valid_codes))

        report = ValidationReport(
            total_sections=total_sections,
            valid_mappings_count=len(valid_mappings),
            orphaned=tuple(orphaned),
            unmapped=tuple(unmapped),
            valid_mappings=tuple(valid_mappings),
        )

        assessment = self._scorer.score(report)
        return replace(
            report,
            summary=ValidationSummary(
                orphaned_count=report.orphaned_count,
                unmapped_count=report.unmapped_count,
                health_score=assessment.health_score,
            ),
        )
