from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UndocumentedFeature:
    code: str
    name: str
    module_code: str
    suggested_section: str

    def to_dict(self) -> dict:
        return {
            "feature_code": self.code,
            "feature_name": self.name,
            "module_code": self.module_code,
            "suggested_section": self.suggested_section,
        }


@dataclass(frozen=True)
class ModuleCoverage:
    module_code: str
    total: int
    documented: int
    gaps: int
    percentage: int
    priority_features: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "module_code": self.module_code,
            "total": self.total,
            "documented": self.documented,
            "gaps": self.gaps,
            "percentage": self.percentage,
            "priority_features": list(self.priority_features),
        }


@dataclass(frozen=True)
class CoverageReport:
    """Inverse view: which registry features have real documentation.

    `undocumented_features` is capped for display; `undocumented_count`
    holds the full count.
    """

    total_sections: int
    sections_with_content: int
    documented_feature_codes: frozenset[str]
    undocumented_features: tuple[UndocumentedFeature, ...]
    undocumented_count: int = 0
    total_features: int = 0
    documented_count: int = 0
    coverage_percentage: int = 0
    modules: tuple[ModuleCoverage, ...] = ()

    def to_dict(self) -> dict:
        return {
            "total_sections": self.total_sections,
            "sections_with_content": self.sections_with_content,
            "documented_feature_codes": sorted(self.documented_feature_codes),
            "undocumented_features": [f.to_dict() for f in self.undocumented_features],
            "undocumented_count": self.undocumented_count,
            "total_features": self.total_features,
            "documented_count": self.documented_count,
            "coverage_percentage": self.coverage_percentage,
            "modules": [m.to_dict() for m in self.modules],
        }
