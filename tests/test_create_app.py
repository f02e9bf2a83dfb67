from __future__ import annotations

from src.enablement_system.enablement_system.main import create_app


def test_create_app_registers_documentation_routes(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_INIT_DB", "0")
    monkeypatch.setenv("AUTO_SEED_DB", "0")

    app = create_app()
    rules = {rule.rule for rule in app.url_map.iter_rules()}

    assert "/admin/documentation/validation" in rules
    assert "/admin/documentation/health" in rules
    assert "/admin/documentation/coverage" in rules
    assert "/admin/documentation/sections/<section_id>/remove-codes" in rules
    assert app.config["REPORT_DISPLAY_LIMIT"] == 20
