import pytest

from core.icp_service import EMPTY_INPUT_MESSAGE, generate_icp, validate_description
from core.icp_templates import B2B_SAAS_ICP, LINKEDIN_OUTREACH_ICP


def test_validate_description_trims():
    assert validate_description("  hello \n") == "hello"


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_validate_description_rejects_blank(text):
    with pytest.raises(ValueError, match=EMPTY_INPUT_MESSAGE):
        validate_description(text)


def test_generate_icp_sleeps_once_then_selects():
    calls = []
    profile = generate_icp(
        "AI-powered LinkedIn outreach tool for B2B SaaS founders",
        delay=2.0,
        sleep=calls.append,
    )
    assert calls == [2.0]
    assert profile == LINKEDIN_OUTREACH_ICP


def test_generate_icp_zero_delay_skips_sleep():
    calls = []
    profile = generate_icp("Our B2B SaaS platform helps growth teams", delay=0, sleep=calls.append)
    assert calls == []
    assert profile == B2B_SAAS_ICP


def test_generate_icp_blank_input_never_calls_backend():
    def backend(text):
        raise AssertionError("backend called")

    with pytest.raises(ValueError):
        generate_icp("   ", backend=backend, delay=0)


def test_generate_icp_custom_backend_gets_trimmed_text():
    seen = []

    def backend(text):
        seen.append(text)
        return {"personas": [{"title": "Custom"}]}

    result = generate_icp("  external  ", backend=backend, delay=0)
    assert seen == ["external"]
    assert result == {"personas": [{"title": "Custom"}]}
