import io

from openpyxl import load_workbook

from config import JSON_EXPORT_FILENAME
from core.icp_generator import select_profile
from core.icp_templates import DEFAULT_ICP, LINKEDIN_OUTREACH_ICP
from utils.export_utils import (
    export_icp_to_excel,
    filter_logic_to_dataframe,
    from_json,
    personas_to_dataframe,
    to_json,
)
from utils.text_utils import humanize_key, is_blank, normalize_whitespace


def test_export_filename():
    assert JSON_EXPORT_FILENAME == "ideal-customer-profile.json"


def test_to_json_layout():
    text = to_json(DEFAULT_ICP)
    assert text.startswith('{\n  "personas": [\n    {\n      "title": "Business Decision Maker"')
    keys = ["personas", "filter_logic", "sample_keywords", "intent_signals"]
    positions = [text.index(f'\n  "{k}"') for k in keys]
    assert positions == sorted(positions)


def test_json_decodes_to_equal_value():
    profile = select_profile("linkedin outreach")
    assert from_json(to_json(profile)) == profile


def test_filter_logic_dataframe():
    df = filter_logic_to_dataframe(LINKEDIN_OUTREACH_ICP["filter_logic"])
    assert list(df.columns) == ["Filter", "Value"]
    assert df.iloc[0]["Filter"] == "Job title contains"
    assert df.iloc[1]["Value"] == "1-200"
    assert df.iloc[0]["Value"].startswith("founder, ceo, head of sales")


def test_personas_dataframe_blanks_missing_fields():
    df = personas_to_dataframe([{"title": "Only a title"}])
    assert df.iloc[0]["Title"] == "Only a title"
    assert df.iloc[0]["Pain Points"] == ""


def test_excel_export_sheets():
    data = export_icp_to_excel(LINKEDIN_OUTREACH_ICP)
    wb = load_workbook(io.BytesIO(data))
    assert wb.sheetnames == ["Personas", "Filter Logic", "Keywords & Signals"]

    ws = wb["Personas"]
    assert ws.cell(row=1, column=1).value == "Title"
    assert ws.cell(row=2, column=1).value == "Startup Founder / CEO"
    assert ws.cell(row=3, column=1).value == "Head of Sales / Sales Manager"

    ws = wb["Filter Logic"]
    assert ws.cell(row=2, column=1).value == "Job title contains"
    assert ws.max_row == 1 + len(LINKEDIN_OUTREACH_ICP["filter_logic"])

    ws = wb["Keywords & Signals"]
    assert ws.cell(row=2, column=1).value == "linkedin outreach"
    assert ws.cell(row=2, column=2).value == LINKEDIN_OUTREACH_ICP["intent_signals"][0]


def test_text_utils():
    assert normalize_whitespace("  a \n\t b ") == "a b"
    assert is_blank("  ")
    assert is_blank(None)
    assert not is_blank(" x ")
    assert humanize_key("company_size_range") == "Company size range"
