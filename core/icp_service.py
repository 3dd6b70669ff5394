"""ICP 생성 진입점: 입력 검증, 지연(외부 호출 자리), 백엔드 호출."""

from __future__ import annotations

import logging
import time
from typing import Callable

from config import SIMULATED_DELAY_SECONDS
from core.icp_generator import select_profile
from utils.text_utils import is_blank, normalize_whitespace

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please describe your product or service first."


def validate_description(text: str | None) -> str:
    """앞뒤 공백을 제거한 설명을 반환한다.

    Raises:
        ValueError: 빈 입력 또는 공백뿐인 입력.
    """
    if is_blank(text):
        raise ValueError(EMPTY_INPUT_MESSAGE)
    return text.strip()


def generate_icp(
    description: str,
    *,
    backend: Callable[[str], dict] = select_profile,
    delay: float = SIMULATED_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> dict:
    """제품 설명으로 ICP를 생성한다.

    지연은 향후 외부 분류 서비스 호출 자리이며 취소할 수 없다.
    backend만 바꾸면 외부 서비스로 대체할 수 있다 (입력 str → ICP dict).

    Args:
        description: 사용자가 입력한 제품 설명.
        backend: 설명 → ICP dict 함수. 기본값은 키워드 분류기.
        delay: 지연 시간(초). 0 이하이면 대기하지 않는다.
        sleep: 대기 함수 (테스트에서 교체).

    Raises:
        ValueError: 빈 입력.
    """
    text = validate_description(description)
    logger.info(
        "generating ICP (%d chars): %.60s",
        len(text), normalize_whitespace(text),
    )

    if delay > 0:
        sleep(delay)

    profile = backend(text)
    logger.info(
        "ICP generated: %s",
        ", ".join(p.get("title", "?") for p in profile.get("personas", [])),
    )
    return profile
