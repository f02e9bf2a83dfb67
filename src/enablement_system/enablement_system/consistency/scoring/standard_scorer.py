from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Mapping, Optional

from ...core import constants
from ...core.enums import HealthStatus
from ..model import HealthAssessment, ValidationReport
from .base import HealthScorer


@dataclass(frozen=True)
class HealthPolicy:
    """Policy constants for the health score and status thresholds."""

    orphan_penalty_per_section: int = constants.DEFAULT_ORPHAN_PENALTY_PER_SECTION
    orphan_penalty_cap: int = constants.DEFAULT_ORPHAN_PENALTY_CAP
    unmapped_penalty_per_section: int = constants.DEFAULT_UNMAPPED_PENALTY_PER_SECTION
    unmapped_penalty_cap: int = constants.DEFAULT_UNMAPPED_PENALTY_CAP
    valid_bonus_cap: int = constants.DEFAULT_VALID_BONUS_CAP
    critical_score_below: int = constants.DEFAULT_CRITICAL_SCORE_BELOW
    critical_orphaned_above: int = constants.DEFAULT_CRITICAL_ORPHANED_ABOVE
    warning_score_below: int = constants.DEFAULT_WARNING_SCORE_BELOW
    warning_unmapped_above: int = constants.DEFAULT_WARNING_UNMAPPED_ABOVE

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, object]]) -> "HealthPolicy":
        """Build a policy from settings; unknown keys are ignored, missing keys keep defaults."""
        if not values:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: int(v) for k, v in values.items() if k in known and v is not None})


class StandardHealthScorer(HealthScorer):
    """Penalty/bonus rule clamped to 0..100, then critical-first status checks."""

    def __init__(self, policy: Optional[HealthPolicy] = None):
        self._policy = policy or HealthPolicy()

    @property
    def policy(self) -> HealthPolicy:
        return self._policy

    def health_score(self, *, orphaned_count: int, unmapped_count: int, valid_mappings_count: int) -> int:
        p = self._policy
        orphan_penalty = min(p.orphan_penalty_cap, orphaned_count * p.orphan_penalty_per_section)
        unmapped_penalty = min(p.unmapped_penalty_cap, unmapped_count * p.unmapped_penalty_per_section)
        valid_bonus = min(p.valid_bonus_cap, valid_mappings_count) if valid_mappings_count > 0 else 0
        raw = 100 - orphan_penalty - unmapped_penalty + valid_bonus
        return max(0, min(100, int(raw)))

    def status(self, *, health_score: int, orphaned_count: int, unmapped_count: int) -> HealthStatus:
        p = self._policy
        if health_score < p.critical_score_below or orphaned_count > p.critical_orphaned_above:
            return HealthStatus.CRITICAL
        if (
            health_score < p.warning_score_below
            or orphaned_count > 0
            or unmapped_count > p.warning_unmapped_above
        ):
            return HealthStatus.WARNING
        return HealthStatus.HEALTHY

    def score(self, report: ValidationReport) -> HealthAssessment:
        orphaned_count = report.orphaned_count
        unmapped_count = report.unmapped_count
        valid_count = report.valid_mappings_count

        score = self.health_score(
            orphaned_count=orphaned_count,
            unmapped_count=unmapped_count,
            valid_mappings_count=valid_count,
        )
        return HealthAssessment(
            health_score=score,
            status=self.status(health_score=score, orphaned_count=orphaned_count, unmapped_count=unmapped_count),
            orphaned_count=orphaned_count,
            unmapped_count=unmapped_count,
            valid_mappings_count=valid_count,
        )
