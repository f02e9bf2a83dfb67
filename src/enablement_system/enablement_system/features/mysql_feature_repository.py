from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import FeatureDefinition
from .repository import FeatureRepository


class MySQLFeatureRepository(FeatureRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active_features(self) -> Sequence[FeatureDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT f.feature_code, f.feature_name, m.module_code, f.is_active
                FROM application_features f
                JOIN application_modules m ON m.module_id = f.module_id
                WHERE f.is_active = 1
                ORDER BY m.module_code ASC, f.display_order ASC, f.feature_code ASC
                """
            )
            rows = fetchall(cur)
            return [
                FeatureDefinition(
                    code=str(r["feature_code"]),
                    name=r.get("feature_name") or "",
                    module_code=r.get("module_code") or "unknown",
                    active=bool(r.get("is_active", 1)),
                )
                for r in rows
            ]
