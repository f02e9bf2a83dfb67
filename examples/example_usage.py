"""Example: call the service layer directly (no Flask).

Controllers are a thin layer; validation, scoring and coverage live in services.
"""

import importlib

from config import get_settings_module

from src.enablement_system.enablement_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        health_policy=getattr(settings, "HEALTH_POLICY", None),
    )
    service = container.documentation_service

    health = service.get_documentation_health()
    print(health.message)
    if health.ok:
        print(health.value.to_dict())

    coverage = service.calculate_manual_coverage()
    if coverage.ok:
        print(f"coverage={coverage.value.coverage_percentage}%")
        for feature in coverage.value.undocumented_features[:5]:
            print(" -", feature.code, "->", feature.suggested_section)


if __name__ == "__main__":
    main()
