from __future__ import annotations

from typing import Iterable

from ..core.constants import DEFAULT_COVERAGE_DISPLAY_LIMIT, DEFAULT_PRIORITY_FEATURES_PER_MODULE
from ..features.model import FeatureDefinition
from ..manuals.model import DocumentationSection
from .model import CoverageReport, ModuleCoverage, UndocumentedFeature


def _percent(part: int, whole: int) -> int:
    # Rounded half up; 0 when there is nothing to cover.
    if whole <= 0:
        return 0
    return (part * 200 + whole) // (2 * whole)


def suggested_section_for(feature: FeatureDefinition) -> str:
    return f"{feature.module_code} manual: new section for {feature.name or feature.code}"


class CoverageCalculator:
    """A feature counts as documented only when a section with content references it."""

    def __init__(
        self,
        *,
        display_limit: int = DEFAULT_COVERAGE_DISPLAY_LIMIT,
        priority_per_module: int = DEFAULT_PRIORITY_FEATURES_PER_MODULE,
    ):
        self._display_limit = max(0, int(display_limit))
        self._priority_per_module = max(0, int(priority_per_module))

    def coverage(
        self,
        registry: Iterable[FeatureDefinition],
        sections: Iterable[DocumentationSection],
    ) -> CoverageReport:
        total_sections = 0
        sections_with_content = 0
        documented: set[str] = set()

        for section in sections:
            total_sections += 1
            if section.has_content:
                sections_with_content += 1
                documented.update(section.referenced_codes)

        features = [f for f in registry if f.active]
        undocumented: list[UndocumentedFeature] = []
        modules: dict[str, dict] = {}

        for feature in features:
            m = modules.get(feature.module_code)
            if not m:
                m = {"total": 0, "documented": 0, "priority": []}
                modules[feature.module_code] = m
            m["total"] += 1

            if feature.code in documented:
                m["documented"] += 1
                continue

            undocumented.append(
                UndocumentedFeature(
                    code=feature.code,
                    name=feature.name,
                    module_code=feature.module_code,
                    suggested_section=suggested_section_for(feature),
                )
            )
            if len(m["priority"]) < self._priority_per_module:
                m["priority"].append(feature.code)

        breakdown = tuple(
            ModuleCoverage(
                module_code=code,
                total=m["total"],
                documented=m["documented"],
                gaps=m["total"] - m["documented"],
                percentage=_percent(m["documented"], m["total"]),
                priority_features=tuple(m["priority"]),
            )
            for code, m in modules.items()
        )

        documented_count = len(features) - len(undocumented)
        return CoverageReport(
            total_sections=total_sections,
            sections_with_content=sections_with_content,
            documented_feature_codes=frozenset(documented),
            undocumented_features=tuple(undocumented[: self._display_limit]),
            undocumented_count=len(undocumented),
            total_features=len(features),
            documented_count=documented_count,
            coverage_percentage=_percent(documented_count, len(features)),
            modules=breakdown,
        )
