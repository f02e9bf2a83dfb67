from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import DocumentationSection


class SectionRepository(Protocol):
    def list_sections_with_references(self) -> Sequence[DocumentationSection]:
        """Sections whose reference set is not NULL (it may still be empty)."""

        raise NotImplementedError

    def list_unmapped_sections(self) -> Sequence[DocumentationSection]:
        """Sections whose reference set is NULL or empty."""

        raise NotImplementedError

    def get_section(self, section_id: str) -> Optional[DocumentationSection]:
        raise NotImplementedError

    def update_section_references(
        self,
        section_id: str,
        codes: Iterable[str],
        *,
        expected_version: Optional[int] = None,
    ) -> bool:
        """Replace the reference set. Returns False when no row matched.

        With `expected_version`, the write only applies if the stored version
        still equals it.
        """

        raise NotImplementedError
