# app.py
# ============================================================
# COVID-19 Machine Learning Detection — Code Viewer
# Thin shell: config, header, render the code screen.
# CODE_VIEWER_APP_IMPORT_ONLY=1 skips every Streamlit call.
# ============================================================

from __future__ import annotations
import streamlit as st

from utils.constants import SAVE_TITLE
from utils.runtime import artifacts_dir, import_only, resource_path

APP_VERSION = "0.1.0"
IMPORT_ONLY = import_only()

if not IMPORT_ONLY:
    st.set_page_config(
        page_title=SAVE_TITLE,
        page_icon="🦠",
        layout="wide",
    )


def header(title: str, version: str) -> None:
    st.markdown(
        f"<div style='display:flex;justify-content:space-between;align-items:center;'>"
        f"<h2 style='margin:0;'>{title}</h2>"
        f"<span style='opacity:0.7;'>v{version}</span>"
        f"</div>",
        unsafe_allow_html=True,
    )


def main() -> None:
    if IMPORT_ONLY:
        return

    with st.sidebar:
        st.markdown("### Code Viewer")
        st.caption(f"App version: {APP_VERSION}")
        st.divider()
        st.caption(f"Source: `{resource_path()}`")
        st.caption(f"Event log: `{artifacts_dir()}`")

    header(SAVE_TITLE, APP_VERSION)

    # Imported here so import-only runs never touch session_state
    from screens.code_viewer import render

    try:
        render()
    except Exception as e:
        st.exception(e)


if __name__ == "__main__":
    main()
