from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass(frozen=True)
class DocumentationSection:
    """Domain entity: a manual section and the feature codes it documents.

    `referenced_codes` is a set; duplicates coming from storage are dropped.
    """

    section_id: str
    section_number: str
    title: str
    manual_code: str
    referenced_codes: frozenset[str] = field(default_factory=frozenset)
    has_content: bool = False
    version: int = 0

    def __post_init__(self):
        if not isinstance(self.referenced_codes, frozenset):
            object.__setattr__(self, "referenced_codes", frozenset(self.referenced_codes or ()))

    def with_references(self, codes: Iterable[str], *, version: Optional[int] = None) -> "DocumentationSection":
        return DocumentationSection(
            section_id=self.section_id,
            section_number=self.section_number,
            title=self.title,
            manual_code=self.manual_code,
            referenced_codes=frozenset(codes),
            has_content=self.has_content,
            version=self.version if version is None else version,
        )
