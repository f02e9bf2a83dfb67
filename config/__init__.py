import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def health_policy_from_env() -> dict:
    """Health policy overrides; unset variables keep the built-in defaults."""
    names = {
        "orphan_penalty_per_section": "HEALTH_ORPHAN_PENALTY_PER_SECTION",
        "orphan_penalty_cap": "HEALTH_ORPHAN_PENALTY_CAP",
        "unmapped_penalty_per_section": "HEALTH_UNMAPPED_PENALTY_PER_SECTION",
        "unmapped_penalty_cap": "HEALTH_UNMAPPED_PENALTY_CAP",
        "valid_bonus_cap": "HEALTH_VALID_BONUS_CAP",
        "critical_score_below": "HEALTH_CRITICAL_SCORE_BELOW",
        "critical_orphaned_above": "HEALTH_CRITICAL_ORPHANED_ABOVE",
        "warning_score_below": "HEALTH_WARNING_SCORE_BELOW",
        "warning_unmapped_above": "HEALTH_WARNING_UNMAPPED_ABOVE",
    }
    return {key: int(os.environ[env]) for key, env in names.items() if os.environ.get(env)}
