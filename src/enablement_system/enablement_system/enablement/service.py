from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from ..consistency.model import HealthAssessment, ValidationReport
from ..consistency.scoring.base import HealthScorer
from ..consistency.scoring.standard_scorer import StandardHealthScorer
from ..consistency.validator import ConsistencyValidator
from ..core.exceptions import FetchError, PersistenceError, ValidationError
from ..coverage.calculator import CoverageCalculator
from ..coverage.model import CoverageReport
from ..features.reader import RegistryReader
from ..manuals.reader import CorpusReader
from ..remediation.model import LINK_FEATURES_TO_SECTION, REMOVE_ORPHANED_CODES, RemediationOutcome
from ..remediation.service import RemediationService

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome returned across the service boundary instead of raising.

    `message` is the user-facing notification text.
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    message: str = ""

    @classmethod
    def success(cls, value: T, message: str = "") -> "OperationResult[T]":
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(cls, error: Exception, message: str) -> "OperationResult[T]":
        return cls(ok=False, error=str(error), error_type=type(error).__name__, message=message)


class DocumentationHealthService:
    """Entry point used by the enablement dashboards.

    Fetches fresh registry/corpus snapshots per call. The last successful
    validation report is cached; a failed fetch leaves it unchanged and
    remediation only marks it stale.
    """

    def __init__(
        self,
        registry_reader: RegistryReader,
        corpus_reader: CorpusReader,
        remediation: RemediationService,
        *,
        scorer: Optional[HealthScorer] = None,
        validator: Optional[ConsistencyValidator] = None,
        coverage_calculator: Optional[CoverageCalculator] = None,
    ):
        self._registry_reader = registry_reader
        self._corpus_reader = corpus_reader
        self._remediation = remediation
        self._scorer = scorer or StandardHealthScorer()
        self._validator = validator or ConsistencyValidator(self._scorer)
        self._coverage = coverage_calculator or CoverageCalculator()

        self._last_report: Optional[ValidationReport] = None
        self._report_stale = False

    @property
    def last_report(self) -> Optional[ValidationReport]:
        return self._last_report

    @property
    def is_report_stale(self) -> bool:
        return self._report_stale

    def validate_documentation(self) -> OperationResult[ValidationReport]:
        try:
            registry = self._registry_reader.load()
            corpus = self._corpus_reader.load()
            report = self._validator.validate(registry.codes, corpus.sections)
        except FetchError as e:
            logger.error("Documentation validation aborted: %s", e)
            return OperationResult.failure(e, "Could not load features or documentation; validation was not run")
        except Exception as e:
            logger.exception("Unexpected error during documentation validation")
            return OperationResult.failure(e, "Unexpected error while validating documentation")

        self._last_report = report
        self._report_stale = False
        logger.info(
            "Validated %s mapped sections: %s orphaned, %s unmapped, score=%s",
            report.total_sections,
            report.orphaned_count,
            report.unmapped_count,
            report.summary.health_score if report.summary else None,
        )
        return OperationResult.success(report, f"Validated {report.total_sections} mapped sections")

    def calculate_manual_coverage(self) -> OperationResult[CoverageReport]:
        try:
            registry = self._registry_reader.load()
            corpus = self._corpus_reader.load()
            report = self._coverage.coverage(registry.features, corpus.sections)
        except FetchError as e:
            logger.error("Manual coverage aborted: %s", e)
            return OperationResult.failure(e, "Could not load features or documentation; coverage was not calculated")
        except Exception as e:
            logger.exception("Unexpected error during coverage calculation")
            return OperationResult.failure(e, "Unexpected error while calculating coverage")

        logger.info(
            "Manual coverage %s%% (%s/%s features)",
            report.coverage_percentage,
            report.documented_count,
            report.total_features,
        )
        return OperationResult.success(report, f"{report.undocumented_count} features are undocumented")

    def get_documentation_health(self) -> OperationResult[HealthAssessment]:
        validated = self.validate_documentation()
        if not validated.ok or validated.value is None:
            return OperationResult(
                ok=False,
                error=validated.error,
                error_type=validated.error_type,
                message=validated.message,
            )

        assessment = self._scorer.score(validated.value)
        logger.info("Documentation health %s (%s)", assessment.health_score, assessment.status.value)
        return OperationResult.success(
            assessment, f"Documentation health is {assessment.status.value} ({assessment.health_score}/100)"
        )

    def remove_orphaned_codes(self, section_id: str, codes: Iterable[str]) -> OperationResult[RemediationOutcome]:
        return self._remediate(
            REMOVE_ORPHANED_CODES,
            section_id,
            lambda: self._remediation.remove_orphaned_codes(section_id, codes),
        )

    def link_features_to_section(self, section_id: str, codes: Iterable[str]) -> OperationResult[RemediationOutcome]:
        return self._remediate(
            LINK_FEATURES_TO_SECTION,
            section_id,
            lambda: self._remediation.link_features_to_section(section_id, codes),
        )

    def _remediate(
        self,
        operation: str,
        section_id: Any,
        action: Callable[[], RemediationOutcome],
    ) -> OperationResult[RemediationOutcome]:
        try:
            outcome = action()
        except ValidationError as e:
            logger.warning("%s rejected for section %s: %s", operation, section_id, e)
            return OperationResult.failure(e, str(e))
        except PersistenceError as e:
            # The write may or may not have landed.
            self._report_stale = True
            logger.error("%s failed for section %s: %s", e.operation, e.section_id, e)
            return OperationResult.failure(e, f"Could not update section {e.section_id} ({e.operation})")
        except Exception as e:
            self._report_stale = True
            logger.exception("Unexpected error during %s for section %s", operation, section_id)
            return OperationResult.failure(e, f"Unexpected error while updating section {section_id}")

        if outcome.changed:
            self._report_stale = True
            message = f"Section {outcome.section_id} updated; re-run validation to refresh the report"
        else:
            message = f"Section {outcome.section_id} already up to date"
        return OperationResult.success(outcome, message)
