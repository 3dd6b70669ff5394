"""ICP Generator: Streamlit 진입점."""

import streamlit as st

from config import APP_ICON, APP_TITLE

# ── 페이지 설정 ──
st.set_page_config(
    page_title=APP_TITLE,
    page_icon=APP_ICON,
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ── 멀티페이지 네비게이션 ──
pages = [
    st.Page("pages/01_icp_generator.py", title="ICP Generator", icon=APP_ICON, default=True),
]

nav = st.navigation(pages)
nav.run()
