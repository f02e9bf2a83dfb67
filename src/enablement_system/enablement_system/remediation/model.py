from __future__ import annotations

from dataclasses import dataclass

REMOVE_ORPHANED_CODES = "remove_orphaned_codes"
LINK_FEATURES_TO_SECTION = "link_features_to_section"


@dataclass(frozen=True)
class RemediationOutcome:
    section_id: str
    operation: str
    previous_codes: frozenset[str]
    codes: frozenset[str]

    @property
    def changed(self) -> bool:
        return self.previous_codes != self.codes

    def to_dict(self) -> dict:
        return {
            "section_id": self.section_id,
            "operation": self.operation,
            "previous_codes": sorted(self.previous_codes),
            "codes": sorted(self.codes),
            "changed": self.changed,
        }
