import pytest

from table_tree_converter.config import settings

KOREAN_HEADERS = ["이름", "나이", "주소.도시", "주소.우편번호", "취미[]", "가족[]이름", "가족[]나이"]


@pytest.fixture
def korean_table():
    """
    Two people; 홍길동 spans two rows that must fold into one record.
    """
    return [
        list(KOREAN_HEADERS),
        ["홍길동", "30", "서울", "12345", "독서", "홍아버지", "60"],
        ["홍길동", "30", "서울", "12345", "등산", "홍어머니", "58"],
        ["김철수", "25", "부산", "67890", "게임", "김동생", "20"],
    ]


@pytest.fixture
def korean_records():
    return [
        {
            "이름": "홍길동",
            "나이": "30",
            "주소": {"도시": "서울", "우편번호": "12345"},
            "취미": ["독서", "등산"],
            "가족": [
                {"이름": "홍아버지", "나이": "60"},
                {"이름": "홍어머니", "나이": "58"},
            ],
        },
        {
            "이름": "김철수",
            "나이": "25",
            "주소": {"도시": "부산", "우편번호": "67890"},
            "취미": ["게임"],
            "가족": [{"이름": "김동생", "나이": "20"}],
        },
    ]


@pytest.fixture
def export_dir(tmp_path, monkeypatch):
    """
    Route exports into a per-test directory.
    """
    monkeypatch.setattr(settings.export, "output_dir", tmp_path)
    return tmp_path
