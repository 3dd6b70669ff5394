import pytest

from core.icp_generator import classify_description, detect_product_signals, select_profile
from core.icp_templates import B2B_SAAS_ICP, DEFAULT_ICP, ICP_TEMPLATES, LINKEDIN_OUTREACH_ICP, get_template


@pytest.mark.parametrize("text", [
    "LinkedIn automation for agencies",
    "cold outreach made simple",
    "a prospecting assistant",
    "We help with PROSPECTING",
])
def test_linkedin_keywords_select_outreach_template(text):
    assert select_profile(text) == LINKEDIN_OUTREACH_ICP


@pytest.mark.parametrize("text", [
    "Our B2B SaaS platform helps growth teams",
    "accounting software for freelancers",
    "a b2b marketplace",
])
def test_saas_keywords_select_saas_template(text):
    assert select_profile(text) == B2B_SAAS_ICP


def test_generic_description_selects_default():
    assert select_profile("A generic productivity app") == DEFAULT_ICP


def test_linkedin_wins_over_saas():
    assert select_profile("Our B2B SaaS tool for LinkedIn outreach") == LINKEDIN_OUTREACH_ICP
    assert select_profile("AI-powered LinkedIn outreach tool for B2B SaaS founders") == LINKEDIN_OUTREACH_ICP


def test_case_insensitive():
    assert select_profile("LINKEDIN tool") == select_profile("linkedin tool")


def test_substring_match_inside_words():
    # "software" inside "softwarehouse", "saas" inside "saasy"
    assert classify_description("a softwarehouse") == "b2b_saas"
    assert classify_description("saasy startup") == "b2b_saas"


def test_ai_signal_does_not_change_selection():
    signals = detect_product_signals("machine learning for retailers")
    assert signals == {"linkedin_tool": False, "b2b_saas": False, "ai_tool": True}
    assert select_profile("machine learning for retailers") == DEFAULT_ICP


def test_empty_string_is_total():
    assert select_profile("") == DEFAULT_ICP
    assert select_profile("   ") == DEFAULT_ICP


def test_repeated_calls_are_equal_but_independent():
    first = select_profile("linkedin")
    second = select_profile("linkedin")
    assert first == second
    assert first is not second
    assert first["personas"] is not second["personas"]


def test_mutating_result_does_not_leak_into_templates():
    profile = select_profile("b2b")
    profile["personas"][0]["title"] = "Changed"
    profile["filter_logic"]["geography"].append("Mars")
    profile["sample_keywords"].clear()

    fresh = select_profile("b2b")
    assert fresh["personas"][0]["title"] == "SaaS Founder / Product Leader"
    assert "Mars" not in fresh["filter_logic"]["geography"]
    assert fresh["sample_keywords"] == B2B_SAAS_ICP["sample_keywords"]


def test_template_registry():
    assert set(ICP_TEMPLATES) == {"linkedin_outreach", "b2b_saas", "default"}
    with pytest.raises(TypeError):
        ICP_TEMPLATES["other"] = {}
    with pytest.raises(KeyError):
        get_template("other")


def test_template_shapes():
    for template in ICP_TEMPLATES.values():
        assert list(template) == ["personas", "filter_logic", "sample_keywords", "intent_signals"]
        assert 1 <= len(template["personas"]) <= 2
        for persona in template["personas"]:
            assert persona["title"]
    assert len(DEFAULT_ICP["personas"]) == 1
