from __future__ import annotations

import logging
from typing import Callable, Iterable

from ..common.validators import require_feature_codes, require_non_empty
from ..core.exceptions import ConcurrencyError, PersistenceError
from ..manuals.repository import SectionRepository
from .model import LINK_FEATURES_TO_SECTION, REMOVE_ORPHANED_CODES, RemediationOutcome

logger = logging.getLogger(__name__)


class RemediationService:
    """Idempotent set mutations on a single section's feature references.

    Codes are not checked against the registry; the next validation run
    reports anything still wrong. Without optimistic locking two concurrent
    calls on the same section are last-write-wins.
    """

    def __init__(self, sections: SectionRepository, *, optimistic_locking: bool = False):
        self._sections = sections
        self._optimistic_locking = bool(optimistic_locking)

    def remove_orphaned_codes(self, section_id: str, codes_to_remove: Iterable[str]) -> RemediationOutcome:
        codes = require_feature_codes(codes_to_remove)
        return self._apply(section_id, REMOVE_ORPHANED_CODES, lambda current: current - codes)

    def link_features_to_section(self, section_id: str, codes_to_add: Iterable[str]) -> RemediationOutcome:
        codes = require_feature_codes(codes_to_add)
        return self._apply(section_id, LINK_FEATURES_TO_SECTION, lambda current: current | codes)

    def _apply(
        self,
        section_id: str,
        operation: str,
        mutate: Callable[[frozenset[str]], frozenset[str]],
    ) -> RemediationOutcome:
        section_id = require_non_empty(section_id, "section_id")

        try:
            section = self._sections.get_section(section_id)
        except Exception as e:
            raise PersistenceError(section_id, operation, f"Could not read section {section_id}") from e
        if section is None:
            raise PersistenceError(section_id, operation, f"Section {section_id} not found")

        current = frozenset(section.referenced_codes)
        updated = frozenset(mutate(current))
        outcome = RemediationOutcome(
            section_id=section_id,
            operation=operation,
            previous_codes=current,
            codes=updated,
        )
        if not outcome.changed:
            logger.debug("%s on section %s is a no-op", operation, section_id)
            return outcome

        expected_version = section.version if self._optimistic_locking else None
        try:
            ok = self._sections.update_section_references(section_id, updated, expected_version=expected_version)
        except Exception as e:
            raise PersistenceError(section_id, operation, f"Could not write section {section_id}") from e

        if not ok:
            if expected_version is not None:
                raise ConcurrencyError(
                    section_id,
                    operation,
                    f"Section {section_id} was modified concurrently (version {expected_version})",
                )
            raise PersistenceError(section_id, operation, f"Section {section_id} was not updated")

        logger.info(
            "%s on section %s: %s -> %s codes", operation, section_id, len(current), len(updated)
        )
        return outcome
