from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import HealthAssessment, ValidationReport


class HealthScorer(ABC):
    """Scorer interface (Strategy Pattern for documentation health)."""

    @abstractmethod
    def score(self, report: ValidationReport) -> HealthAssessment:
        raise NotImplementedError
