from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.exceptions import FetchError
from .model import FeatureDefinition
from .repository import FeatureRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrySnapshot:
    """Immutable view of the active feature registry at fetch time."""

    features: tuple[FeatureDefinition, ...]

    @property
    def codes(self) -> frozenset[str]:
        return frozenset(f.code for f in self.features if f.active)


class RegistryReader:
    """Loads the ground-truth set of active features."""

    def __init__(self, features: FeatureRepository):
        self._features = features

    def load(self) -> RegistrySnapshot:
        try:
            rows = self._features.list_active_features()
        except Exception as e:
            raise FetchError("feature registry") from e

        # Inactive rows are treated as if they did not exist.
        active = tuple(f for f in rows if f.active)
        logger.debug("Loaded %s active features", len(active))
        return RegistrySnapshot(features=active)
