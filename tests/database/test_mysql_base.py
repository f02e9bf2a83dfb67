from __future__ import annotations

import pytest

from src.enablement_system.enablement_system.database.bootstrap import _iter_sql_statements
from src.enablement_system.enablement_system.database.mysql_base import decode_feature_codes, encode_feature_codes


def test_decode_handles_null_text_bytes_and_lists():
    assert decode_feature_codes(None) == frozenset()
    assert decode_feature_codes("null") == frozenset()
    assert decode_feature_codes("[]") == frozenset()
    assert decode_feature_codes('["a", "b", "a"]') == {"a", "b"}
    assert decode_feature_codes(b'["a"]') == {"a"}
    assert decode_feature_codes(["a", " ", None, "b "]) == {"a", "b"}


def test_decode_rejects_garbage():
    with pytest.raises(ValueError):
        decode_feature_codes("not json")
    with pytest.raises(TypeError):
        decode_feature_codes(42)


def test_encode_is_sorted_and_deduplicated():
    assert encode_feature_codes(["b", "a", "b"]) == '["a", "b"]'


def test_sql_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nSELECT 1;"

    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]
