from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used by the admin guard."""

    ADMIN = "admin"


class OrphanSeverity(str, Enum):
    """Section-level severity of an orphaned mapping."""

    CRITICAL = "critical"
    WARNING = "warning"


class HealthStatus(str, Enum):
    """Report-level status derived from the health score.

    Independent from OrphanSeverity even though both use "critical".
    """

    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"
