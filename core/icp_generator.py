"""제품 설명 키워드 분류 → ICP 템플릿 선택."""

import logging

from config import (
    AI_KEYWORDS,
    B2B_SAAS_KEYWORDS,
    LINKEDIN_KEYWORDS,
    TEMPLATE_B2B_SAAS,
    TEMPLATE_DEFAULT,
    TEMPLATE_LINKEDIN,
)
from core.icp_templates import get_template

logger = logging.getLogger(__name__)


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(k in text for k in keywords)


def detect_product_signals(description: str) -> dict[str, bool]:
    """설명 텍스트에서 제품 유형 신호를 감지한다 (대소문자 무시, 부분 문자열).

    Returns:
        {"linkedin_tool": bool, "b2b_saas": bool, "ai_tool": bool}
    """
    text = description.lower()
    return {
        "linkedin_tool": _contains_any(text, LINKEDIN_KEYWORDS),
        "b2b_saas": _contains_any(text, B2B_SAAS_KEYWORDS),
        "ai_tool": _contains_any(text, AI_KEYWORDS),
    }


def classify_description(description: str) -> str:
    """템플릿 키를 반환한다.

    우선순위: LinkedIn/아웃리치 → B2B SaaS → 기본.
    ai_tool 신호는 계산·로깅만 하고 선택에는 쓰지 않는다.
    """
    signals = detect_product_signals(description)
    logger.debug("product signals: %s", signals)

    if signals["linkedin_tool"]:
        return TEMPLATE_LINKEDIN
    if signals["b2b_saas"]:
        return TEMPLATE_B2B_SAAS
    return TEMPLATE_DEFAULT


def select_profile(description: str) -> dict:
    """제품 설명에 맞는 ICP를 반환한다.

    모든 문자열 입력(빈 문자열 포함)에 대해 실패하지 않으며,
    매 호출마다 템플릿의 독립 사본을 새로 만든다.

    Returns:
        {"personas": [...], "filter_logic": {...},
         "sample_keywords": [...], "intent_signals": [...]}
    """
    key = classify_description(description)
    logger.debug("selected template: %s", key)
    return get_template(key)
