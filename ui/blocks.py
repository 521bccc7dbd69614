# ui/blocks.py
"""
Streamlit primitives for the code viewer: the display region and the save control.
Both take preformatted data; neither touches session_state.
"""

from __future__ import annotations
from typing import Any, Dict

import streamlit as st

from utils.constants import DISPLAY_KEY, SAVE_KEY


def display_region(text: str, key: str = DISPLAY_KEY) -> None:
    """Render `text` verbatim; the region's whole content is replaced each run."""
    with st.container(key=key):
        st.code(text, language=None)


def save_control(payload: Dict[str, Any], label: str = "Save code", key: str = SAVE_KEY) -> bool:
    """
    Download button for a prepared payload ({"data", "file_name", "mime"}).
    Returns True on the run in which it was clicked.
    """
    return st.download_button(label, key=key, **payload)


def load_failed(message: str) -> None:
    st.error(f"Could not load code: {message}")
