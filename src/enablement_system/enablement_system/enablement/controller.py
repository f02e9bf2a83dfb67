from __future__ import annotations

from functools import wraps

from flask import Flask, current_app, jsonify, request, session

from ..core.enums import Role
from ..container import Container

_ERROR_STATUS = {
    "ValidationError": 400,
    "FetchError": 502,
    "PersistenceError": 500,
    "ConcurrencyError": 409,
}


def register(app: Flask, container: Container) -> None:
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"success": False, "message": "Please log in to continue"}), 401

            if session.get("role") != Role.ADMIN.value:
                return jsonify({"success": False, "message": "Administrator access required"}), 403

            return view(*args, **kwargs)

        return wrapper

    def _respond(result, data):
        if result.ok:
            return jsonify({"success": True, "message": result.message, "data": data}), 200
        status = _ERROR_STATUS.get(result.error_type or "", 500)
        return jsonify({"success": False, "message": result.message, "error": result.error_type}), status

    def _requested_codes():
        payload = request.get_json(silent=True)
        return payload.get("codes") if isinstance(payload, dict) else None

    @app.route("/admin/documentation/validation", methods=["GET"], endpoint="documentation_validation")
    @admin_required
    def documentation_validation():
        result = container.documentation_service.validate_documentation()
        limit = current_app.config.get("REPORT_DISPLAY_LIMIT")
        data = result.value.to_dict(limit=limit) if result.ok and result.value else None
        return _respond(result, data)

    @app.route("/admin/documentation/health", methods=["GET"], endpoint="documentation_health")
    @admin_required
    def documentation_health():
        result = container.documentation_service.get_documentation_health()
        data = result.value.to_dict() if result.ok and result.value else None
        return _respond(result, data)

    @app.route("/admin/documentation/coverage", methods=["GET"], endpoint="documentation_coverage")
    @admin_required
    def documentation_coverage():
        result = container.documentation_service.calculate_manual_coverage()
        data = result.value.to_dict() if result.ok and result.value else None
        return _respond(result, data)

    @app.route(
        "/admin/documentation/sections/<section_id>/remove-codes",
        methods=["POST"],
        endpoint="documentation_remove_codes",
    )
    @admin_required
    def documentation_remove_codes(section_id: str):
        result = container.documentation_service.remove_orphaned_codes(section_id, _requested_codes())
        data = result.value.to_dict() if result.ok and result.value else None
        return _respond(result, data)

    @app.route(
        "/admin/documentation/sections/<section_id>/link-features",
        methods=["POST"],
        endpoint="documentation_link_features",
    )
    @admin_required
    def documentation_link_features(section_id: str):
        result = container.documentation_service.link_features_to_section(section_id, _requested_codes())
        data = result.value.to_dict() if result.ok and result.value else None
        return _respond(result, data)
