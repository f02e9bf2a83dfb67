from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureDefinition:
    """Domain entity: an application feature from the registry."""

    code: str
    name: str
    module_code: str
    active: bool = True
