import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# ── 경로 ──
BASE_DIR = Path(__file__).parent

load_dotenv(BASE_DIR / ".env")

# ── 앱 ──
APP_TITLE = "ICP Generator"
APP_ICON = "🎯"

# ── 로깅 ──
LOG_LEVEL = os.getenv("ICP_LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# ── 생성 ──
SIMULATED_DELAY_SECONDS = float(os.getenv("ICP_SIMULATED_DELAY_SECONDS", "2.0"))

# ── 키워드 분류 (소문자, 부분 문자열 매칭) ──
LINKEDIN_KEYWORDS = ("linkedin", "outreach", "prospecting")
B2B_SAAS_KEYWORDS = ("saas", "b2b", "software")
AI_KEYWORDS = ("ai", "artificial intelligence", "machine learning")

# ── 템플릿 키 ──
TEMPLATE_LINKEDIN = "linkedin_outreach"
TEMPLATE_B2B_SAAS = "b2b_saas"
TEMPLATE_DEFAULT = "default"

# ── 내보내기 ──
JSON_EXPORT_FILENAME = "ideal-customer-profile.json"
EXCEL_EXPORT_FILENAME = "ideal-customer-profile.xlsx"
JSON_INDENT = 2

# ── 페르소나 표시 이름 (순서 = 엑셀 컬럼 순서) ──
PERSONA_FIELD_LABELS = {
    "title": "Title",
    "job_titles": "Job Titles",
    "company_stage": "Company Stage",
    "industry": "Industry",
    "team_size": "Team Size",
    "region": "Region",
    "pain_points": "Pain Points",
    "growth_signals": "Growth Signals",
}

EXAMPLE_DESCRIPTION = (
    "Example: We're an AI-powered LinkedIn outreach tool that helps B2B SaaS "
    "founders and sales teams personalize cold messages at scale. Our tool "
    "analyzes prospect profiles and generates custom messaging that increases "
    "reply rates by 3x..."
)
