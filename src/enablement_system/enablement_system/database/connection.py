from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

import mysql.connector

DEFAULT_MYSQL_PORT = 3306


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_settings(cls, db_config: Mapping[str, object]) -> "DBConfig":
        """Build from a settings `DB_CONFIG` dict; host, user and database are required."""
        missing = [key for key in ("host", "user", "database") if not db_config.get(key)]
        if missing:
            raise ValueError(f"DB_CONFIG is missing: {', '.join(missing)}")
        return cls(
            host=str(db_config["host"]),
            port=int(db_config.get("port") or DEFAULT_MYSQL_PORT),
            user=str(db_config["user"]),
            password=str(db_config.get("password") or ""),
            database=str(db_config["database"]),
        )

    @property
    def label(self) -> str:
        # Safe for logs: no password.
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Connection factory shared by the feature and section repositories.

    Each repository call opens a short-lived connection: validation runs are
    batch reads and remediation is one read plus one write per call.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=self._config.port,
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
            charset="utf8mb4",
        )
