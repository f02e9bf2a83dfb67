from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.exceptions import FetchError
from .model import DocumentationSection
from .repository import SectionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorpusSnapshot:
    """Immutable view of every documentation section at fetch time."""

    sections: tuple[DocumentationSection, ...]


class CorpusReader:
    """Loads documentation sections from both section queries.

    A section returned by both queries (stored as an empty array) is kept once.
    """

    def __init__(self, sections: SectionRepository):
        self._sections = sections

    def load(self) -> CorpusSnapshot:
        try:
            with_refs = list(self._sections.list_sections_with_references())
            unmapped = list(self._sections.list_unmapped_sections())
        except Exception as e:
            raise FetchError("documentation corpus") from e

        seen: set[str] = set()
        merged: list[DocumentationSection] = []
        for section in with_refs + unmapped:
            if section.section_id in seen:
                continue
            seen.add(section.section_id)
            merged.append(section)

        logger.debug("Loaded %s documentation sections", len(merged))
        return CorpusSnapshot(sections=tuple(merged))
