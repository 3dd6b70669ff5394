"""ICP 생성 페이지: 제품 설명 입력 → 이상적 고객 프로파일 생성."""

import logging

import streamlit as st

from config import EXAMPLE_DESCRIPTION, SIMULATED_DELAY_SECONDS
from core.icp_service import EMPTY_INPUT_MESSAGE, generate_icp
from components.icp_components import render_empty_state, render_icp_output
from utils.text_utils import is_blank

logger = logging.getLogger(__name__)

# ── 페이지 헤더 ──
st.title("🎯 ICP Generator")
st.markdown(
    "Generate structured Ideal Customer Profiles that can be directly used for "
    "prospecting on LinkedIn, Apollo.io, Clearbit, and other B2B platforms."
)

# ── 세션 상태 초기화 ──
if "icp_output" not in st.session_state:
    st.session_state.icp_output = None
if "icp_generating" not in st.session_state:
    st.session_state.icp_generating = False
if "icp_notice" not in st.session_state:
    st.session_state.icp_notice = None


def _request_generation():
    """버튼 콜백. 재실행 전에 호출되므로 이번 실행에서 버튼이 비활성으로 그려진다."""
    if st.session_state.icp_generating:
        return
    if is_blank(st.session_state.get("icp_input")):
        st.session_state.icp_notice = ("warning", f"**Input Required**: {EMPTY_INPUT_MESSAGE}")
        return
    st.session_state.icp_generating = True


col_input, col_output = st.columns(2)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 섹션 1: 제품 설명 입력
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
with col_input:
    with st.container(border=True):
        st.subheader("👥 Describe Your Product")
        st.caption(
            "Provide details about your product, service, target market, "
            "and value proposition."
        )

        description = st.text_area(
            "Product Description",
            height=300,
            placeholder=EXAMPLE_DESCRIPTION,
            key="icp_input",
        )

        st.button(
            "✨ Generate ICP",
            type="primary",
            disabled=st.session_state.icp_generating,
            on_click=_request_generation,
        )

    if st.session_state.icp_generating:
        try:
            with st.spinner("Generating ICP..."):
                st.session_state.icp_output = generate_icp(
                    description, delay=SIMULATED_DELAY_SECONDS,
                )
            st.session_state.icp_notice = (
                "success",
                "**ICP Generated Successfully**: Your ideal customer profile is ready!",
            )
        except Exception:
            logger.exception("ICP generation failed")
            st.session_state.icp_notice = ("error", "**Generation Failed**: Please try again.")
        finally:
            st.session_state.icp_generating = False
        # 버튼을 다시 활성 상태로 그리기 위해 재실행
        st.rerun()

    # 알림은 한 번만 표시
    notice = st.session_state.icp_notice
    if notice:
        level, message = notice
        getattr(st, level)(message)
        st.session_state.icp_notice = None

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 섹션 2: 결과
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
with col_output:
    if st.session_state.icp_output:
        render_icp_output(st.session_state.icp_output)
    else:
        render_empty_state()
