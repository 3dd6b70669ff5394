"""ICP JSON/Excel 내보내기 유틸리티."""

import io
import json
from datetime import datetime

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from config import JSON_INDENT, PERSONA_FIELD_LABELS
from utils.text_utils import humanize_key


def to_json(profile: dict) -> str:
    """ICP를 표준 JSON 텍스트로 직렬화 (선언 순서 유지, 2칸 들여쓰기)."""
    return json.dumps(profile, indent=JSON_INDENT, ensure_ascii=False)


def from_json(text: str) -> dict:
    """to_json() 결과를 다시 dict로."""
    return json.loads(text)


def _join(value) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return "" if value is None else str(value)


def filter_logic_to_dataframe(filter_logic: dict) -> pd.DataFrame:
    """필터 로직을 2열 표(Filter, Value)로 변환."""
    rows = [
        {"Filter": humanize_key(key), "Value": _join(value)}
        for key, value in filter_logic.items()
    ]
    return pd.DataFrame(rows, columns=["Filter", "Value"])


def personas_to_dataframe(personas: list[dict]) -> pd.DataFrame:
    """페르소나 목록을 한 행 = 한 페르소나 표로 변환 (없는 필드는 빈칸)."""
    rows = []
    for p in personas:
        rows.append({
            label: _join(p.get(field))
            for field, label in PERSONA_FIELD_LABELS.items()
        })
    return pd.DataFrame(rows, columns=list(PERSONA_FIELD_LABELS.values()))


def export_icp_to_excel(profile: dict) -> bytes:
    """ICP를 엑셀 파일(bytes)로 내보내기.

    시트: Personas / Filter Logic / Keywords & Signals
    """
    wb = Workbook()

    header_font = Font(bold=True, color="FFFFFF", size=10)
    header_fill = PatternFill(start_color="1E88E5", end_color="1E88E5", fill_type="solid")
    body_font = Font(size=10)
    wrap_align = Alignment(wrap_text=True, vertical="top")

    def _write_sheet(ws, df: pd.DataFrame, widths: list[int]):
        for j, h in enumerate(df.columns, 1):
            cell = ws.cell(row=1, column=j, value=h)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center", vertical="center")

        for i, row in enumerate(df.itertuples(index=False), start=2):
            for j, v in enumerate(row, 1):
                cell = ws.cell(row=i, column=j, value=v)
                cell.font = body_font
                cell.alignment = wrap_align

        for j, w in enumerate(widths, 1):
            ws.column_dimensions[get_column_letter(j)].width = w

    # 시트 1: 페르소나
    ws_personas = wb.active
    ws_personas.title = "Personas"
    _write_sheet(
        ws_personas,
        personas_to_dataframe(profile.get("personas", [])),
        [30, 35, 20, 30, 12, 25, 50, 50],
    )

    # 시트 2: 필터 로직
    ws_filters = wb.create_sheet("Filter Logic")
    _write_sheet(
        ws_filters,
        filter_logic_to_dataframe(profile.get("filter_logic", {})),
        [28, 80],
    )

    # 시트 3: 키워드 & 인텐트 신호 (길이가 다르면 빈칸으로 채움)
    keywords = profile.get("sample_keywords", [])
    signals = profile.get("intent_signals", [])
    n = max(len(keywords), len(signals))
    kw_df = pd.DataFrame({
        "Sample Keywords": keywords + [""] * (n - len(keywords)),
        "Intent Signals": signals + [""] * (n - len(signals)),
    })
    ws_kw = wb.create_sheet("Keywords & Signals")
    _write_sheet(ws_kw, kw_df, [28, 70])

    ws_personas.cell(
        row=len(profile.get("personas", [])) + 3, column=1,
        value=f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
    ).font = Font(size=9, color="888888")

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()
