from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_feature_codes, encode_feature_codes, fetchall, fetchone
from .model import DocumentationSection
from .repository import SectionRepository

_SECTION_COLUMNS = """
    s.section_id, s.section_number, s.title, s.source_feature_codes, s.version,
    (s.markdown_content IS NOT NULL AND TRIM(s.markdown_content) <> '') AS has_content,
    md.manual_code
"""


def _to_section(r: Dict[str, Any]) -> DocumentationSection:
    return DocumentationSection(
        section_id=str(r["section_id"]),
        section_number=r.get("section_number") or "",
        title=r.get("title") or "",
        manual_code=r.get("manual_code") or "",
        referenced_codes=decode_feature_codes(r.get("source_feature_codes")),
        has_content=bool(r.get("has_content")),
        version=int(r.get("version") or 0),
    )


class MySQLSectionRepository(SectionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_sections_with_references(self) -> Sequence[DocumentationSection]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SECTION_COLUMNS}
                FROM manual_sections s
                JOIN manual_definitions md ON md.manual_id = s.manual_id
                WHERE s.source_feature_codes IS NOT NULL
                ORDER BY md.manual_code ASC, s.display_order ASC, s.section_number ASC
                """
            )
            return [_to_section(r) for r in fetchall(cur)]

    def list_unmapped_sections(self) -> Sequence[DocumentationSection]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SECTION_COLUMNS}
                FROM manual_sections s
                JOIN manual_definitions md ON md.manual_id = s.manual_id
                WHERE s.source_feature_codes IS NULL OR JSON_LENGTH(s.source_feature_codes) = 0
                ORDER BY md.manual_code ASC, s.display_order ASC, s.section_number ASC
                """
            )
            return [_to_section(r) for r in fetchall(cur)]

    def get_section(self, section_id: str) -> Optional[DocumentationSection]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SECTION_COLUMNS}
                FROM manual_sections s
                JOIN manual_definitions md ON md.manual_id = s.manual_id
                WHERE s.section_id=%s
                """,
                (str(section_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _to_section(r)

    def update_section_references(
        self,
        section_id: str,
        codes: Iterable[str],
        *,
        expected_version: Optional[int] = None,
    ) -> bool:
        payload = encode_feature_codes(codes)
        with db_cursor(self._conn_factory) as (_, cur):
            if expected_version is None:
                cur.execute(
                    """
                    UPDATE manual_sections
                    SET source_feature_codes=CAST(%s AS JSON), version=version + 1
                    WHERE section_id=%s
                    """,
                    (payload, str(section_id)),
                )
            else:
                cur.execute(
                    """
                    UPDATE manual_sections
                    SET source_feature_codes=CAST(%s AS JSON), version=version + 1
                    WHERE section_id=%s AND version=%s
                    """,
                    (payload, str(section_id), int(expected_version)),
                )
            return cur.rowcount > 0
