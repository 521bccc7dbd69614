# screens/code_viewer.py
import streamlit as st

from services.text_saver import download_payload
from state import CodePresenter, Phase
from ui.blocks import display_region, load_failed, save_control
from utils.constants import PRESENTER_KEY
from utils.eventlog import describe_error, log_event
from utils.runtime import encoding, resource_path


def get_presenter() -> CodePresenter:
    """One presenter per browser session; reruns reuse it so the load fires once."""
    presenter = st.session_state.get(PRESENTER_KEY)
    if presenter is None:
        presenter = CodePresenter()
        st.session_state[PRESENTER_KEY] = presenter
    return presenter


def render() -> dict:
    presenter = get_presenter()
    enc = encoding()

    if presenter.phase is Phase.UNINITIALIZED:
        presenter.request(resource_path(), enc)
    if presenter.phase is Phase.LOADING:
        with st.spinner("Loading code…"):
            presenter.wait()

    if presenter.phase is Phase.FAILED and presenter.error is not None:
        load_failed(describe_error(presenter.error))

    if presenter.display_text is not None:
        display_region(presenter.display_text)

    if presenter.save_visible:
        request = presenter.save()
        if save_control(download_payload(request.lines, request.title, encoding=enc)):
            log_event("save_requested", title=request.title, lines=len(request.lines))

    return {
        "valid_to_proceed": presenter.can_save,
        "payload": {
            "phase": presenter.phase.value,
            "source": presenter.source,
            "lines": len(presenter.lines or ()),
        },
    }
