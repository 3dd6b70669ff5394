"""입력 텍스트 정규화 유틸리티."""

import re


def normalize_whitespace(text: str) -> str:
    """연속 공백/탭/줄바꿈을 단일 공백으로."""
    return re.sub(r"\s+", " ", text).strip()


def is_blank(text: str | None) -> bool:
    """None, 빈 문자열, 공백뿐인 문자열이면 True."""
    return not text or not text.strip()


def humanize_key(key: str) -> str:
    """snake_case 키를 표시용 문구로 ("job_title_contains" → "Job title contains")."""
    return key.replace("_", " ").strip().capitalize()
