"""ICP 결과 UI 컴포넌트."""

import streamlit as st

from config import EXCEL_EXPORT_FILENAME, JSON_EXPORT_FILENAME
from utils.export_utils import export_icp_to_excel, filter_logic_to_dataframe, to_json
from utils.text_utils import humanize_key


def render_empty_state():
    """ICP 생성 전 안내 카드."""
    with st.container(border=True):
        st.markdown("### 🎯 Your ICP will appear here")
        st.caption("Fill in your product details and click generate")


def _render_bullets(items: list[str], color: str | None = None):
    for item in items:
        st.markdown(f"- :{color}[{item}]" if color else f"- {item}")


def render_persona_card(persona: dict, index: int):
    """단일 페르소나 카드 렌더링. 없는 필드는 건너뛴다."""
    with st.container(border=True):
        col_title, col_badge = st.columns([4, 1])
        with col_title:
            st.markdown(f"#### {persona.get('title', 'Persona')}")
        with col_badge:
            st.caption(f"Persona {index}")

        col1, col2 = st.columns(2)
        with col1:
            job_titles = persona.get("job_titles")
            if job_titles:
                st.markdown("**Job Titles**")
                st.markdown(" ".join(f"`{t}`" for t in job_titles))

        with col2:
            st.markdown("**Company Details**")
            if persona.get("company_stage"):
                st.markdown(f"Stage: {persona['company_stage']}")
            if persona.get("team_size"):
                st.markdown(f"Team Size: {persona['team_size']}")
            if persona.get("industry"):
                st.markdown(f"Industry: {', '.join(persona['industry'])}")
            if persona.get("region"):
                st.markdown(f"Region: {', '.join(persona['region'])}")

        pain_points = persona.get("pain_points")
        if pain_points:
            st.markdown("**Pain Points**")
            _render_bullets(pain_points, "red")

        growth_signals = persona.get("growth_signals")
        if growth_signals:
            st.markdown("**Growth Signals**")
            _render_bullets(growth_signals, "green")


def render_filter_logic(filter_logic: dict):
    """프로스펙팅 플랫폼용 필터 조건 렌더링."""
    if not filter_logic:
        return

    with st.container(border=True):
        st.subheader("Filter Logic")
        st.caption("Use these filters in LinkedIn Sales Navigator, Apollo.io, or similar platforms")

        cols = st.columns(2)
        for i, (key, value) in enumerate(filter_logic.items()):
            with cols[i % 2]:
                st.markdown(f"**{humanize_key(key)}**")
                st.markdown(", ".join(value) if isinstance(value, list) else str(value))

        with st.expander("Table view"):
            st.dataframe(
                filter_logic_to_dataframe(filter_logic),
                width="stretch",
                hide_index=True,
            )


def render_keywords(keywords: list[str]):
    if not keywords:
        return
    with st.container(border=True):
        st.subheader("Sample Keywords")
        st.markdown(" ".join(f"`{k}`" for k in keywords))


def render_intent_signals(signals: list[str]):
    if not signals:
        return
    with st.container(border=True):
        st.subheader("Intent Signals")
        _render_bullets(signals)


def render_json_view(profile: dict):
    """원본 JSON 보기. st.code 블록의 복사 버튼으로 클립보드 복사."""
    with st.container(border=True):
        st.subheader("Raw JSON Output")
        st.caption("Ready to import into your prospecting tools")
        st.code(to_json(profile), language="json")


def render_structured_view(profile: dict):
    """페르소나 → 필터 로직 → 키워드/인텐트 신호 순서로 렌더링."""
    personas = profile.get("personas") or []
    if personas:
        with st.container(border=True):
            st.subheader("Customer Personas")
            st.caption("Key decision makers and influencers in your target market")
            for i, persona in enumerate(personas, 1):
                render_persona_card(persona, i)

    render_filter_logic(profile.get("filter_logic") or {})

    col_kw, col_sig = st.columns(2)
    with col_kw:
        render_keywords(profile.get("sample_keywords") or [])
    with col_sig:
        render_intent_signals(profile.get("intent_signals") or [])


def render_icp_output(profile: dict):
    """보기 전환 토글 + 다운로드 버튼 + 결과 본문."""
    col_toggle, col_json, col_excel = st.columns([2, 1, 1])

    with col_toggle:
        show_json = st.toggle("Show JSON", value=False, key="icp_show_json")

    with col_json:
        st.download_button(
            "Download JSON",
            data=to_json(profile),
            file_name=JSON_EXPORT_FILENAME,
            mime="application/json",
        )

    with col_excel:
        st.download_button(
            "Download Excel",
            data=export_icp_to_excel(profile),
            file_name=EXCEL_EXPORT_FILENAME,
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )

    if show_json:
        render_json_view(profile)
    else:
        render_structured_view(profile)
