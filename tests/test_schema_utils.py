from table_tree_converter.schema_utils import build_header_tree

from conftest import KOREAN_HEADERS


def test_header_tree_for_korean_headers():
    assert build_header_tree(KOREAN_HEADERS) == {
        "이름": "이름",
        "나이": "나이",
        "주소": {"도시": "주소.도시", "우편번호": "주소.우편번호"},
        "취미[]": "취미[]",
        "가족[]": {"이름": "가족[]이름", "나이": "가족[]나이"},
    }


def test_leaf_and_branch_share_a_node():
    expected = {"a": {"__self__": "a", "b": "a.b"}}
    assert build_header_tree(["a", "a.b"]) == expected
    assert build_header_tree(["a.b", "a"]) == expected


def test_legacy_alias_and_empty_headers():
    assert build_header_tree(["XX.name", "", "[]"]) == {"XX[]": {"name": "XX.name"}}
