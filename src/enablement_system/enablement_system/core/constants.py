"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ORPHAN_PENALTY_PER_SECTION = 10
DEFAULT_ORPHAN_PENALTY_CAP = 50
DEFAULT_UNMAPPED_PENALTY_PER_SECTION = 2
DEFAULT_UNMAPPED_PENALTY_CAP = 30
DEFAULT_VALID_BONUS_CAP = 20

DEFAULT_CRITICAL_SCORE_BELOW = 60
DEFAULT_CRITICAL_ORPHANED_ABOVE = 5
DEFAULT_WARNING_SCORE_BELOW = 80
DEFAULT_WARNING_UNMAPPED_ABOVE = 10

DEFAULT_COVERAGE_DISPLAY_LIMIT = 50
DEFAULT_REPORT_DISPLAY_LIMIT = 20
DEFAULT_PRIORITY_FEATURES_PER_MODULE = 5

ORPHAN_ACTION_REQUIRED = "Remove invalid codes or add features to registry"
