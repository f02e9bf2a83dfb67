from __future__ import annotations

from typing import Protocol, Sequence

from .model import FeatureDefinition


class FeatureRepository(Protocol):
    def list_active_features(self) -> Sequence[FeatureDefinition]:
        raise NotImplementedError
