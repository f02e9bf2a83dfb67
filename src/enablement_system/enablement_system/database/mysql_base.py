from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def decode_feature_codes(value: Any) -> frozenset[str]:
    """Normalize a JSON reference column into a set of feature codes.

    mysql-connector can return a JSON column as:
    - None (SQL NULL)
    - str / bytes holding JSON text (e.g. '["payroll_run", "leave_types"]')
    - an already decoded list
    Duplicates and blank entries are dropped.
    """

    if value is None:
        return frozenset()

    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return frozenset()
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid feature code array: {value!r}") from e

    if value is None:
        return frozenset()

    if not isinstance(value, (list, tuple, set, frozenset)):
        raise TypeError(f"Unsupported feature code column type: {type(value)!r}")

    return frozenset(str(code).strip() for code in value if code is not None and str(code).strip())


def encode_feature_codes(codes) -> str:
    """Serialize a reference set for the JSON column (sorted, deduplicated)."""
    return json.dumps(sorted(set(codes)))
