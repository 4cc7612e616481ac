"""Streamlit page — renders AnalysisSession state and forwards user events to it.

Run with `xray-assist` or `streamlit run xray_assist/app.py`.
"""
import asyncio
import logging

import streamlit as st

from xray_assist import view
from xray_assist.analysis.factory import build_analysis_client
from xray_assist.config import Config
from xray_assist.constants import (
    MSG_APP_STARTING,
    STATE_SESSION,
    STATE_UPLOADER,
    UI_DISCLAIMER,
    UI_PAGE_ICON,
    UI_PAGE_TITLE,
    UI_PREVIEW_CAPTION,
    UI_PREVIEW_HEADER,
    UI_RESET,
    UI_RESULTS_HEADER,
    UI_RTL_STYLE,
    UI_SUBTITLE,
    UI_TITLE,
    UI_UPLOAD_HELP,
    UI_UPLOAD_LABEL,
    UPLOAD_EXTENSIONS,
    WIDGET_ANALYZE,
    WIDGET_ANALYZE_BUSY,
    WIDGET_UPLOAD,
)
from xray_assist.ingest import SelectedImage
from xray_assist.main import setup_logging
from xray_assist.session import AnalysisSession

logger = logging.getLogger(__name__)


@st.cache_resource
def _load_config() -> Config:
    config = Config.from_env()
    setup_logging(config.log_level)
    logger.info(MSG_APP_STARTING, config.provider, config.model)
    return config


def _session(config: Config) -> AnalysisSession:
    if STATE_SESSION not in st.session_state:
        st.session_state[STATE_SESSION] = AnalysisSession(build_analysis_client(config))
        st.session_state[STATE_UPLOADER] = 0
    return st.session_state[STATE_SESSION]


def _uploader_key() -> str:
    return WIDGET_UPLOAD % st.session_state[STATE_UPLOADER]


# ── event callbacks ───────────────────────────────────────────────────────────


def _on_upload(session: AnalysisSession, key: str) -> None:
    upload = st.session_state.get(key)
    match upload:
        case None:
            pass
        case _:
            session.select_file(SelectedImage.from_upload(upload))


def _on_reset(session: AnalysisSession) -> None:
    session.reset()
    st.session_state[STATE_UPLOADER] += 1


# ── rendering ─────────────────────────────────────────────────────────────────


def _render_upload(session: AnalysisSession) -> None:
    key = _uploader_key()
    st.file_uploader(
        UI_UPLOAD_LABEL,
        type=list(UPLOAD_EXTENSIONS),
        help=UI_UPLOAD_HELP,
        key=key,
        on_change=_on_upload,
        args=(session, key),
    )


def _render_result_pane(session: AnalysisSession, slot) -> None:
    pane = view.result_pane(session)
    match pane.kind:
        case "spinner":
            slot.info(pane.content, icon="⏳")
        case "error":
            slot.error(pane.content)
        case "report":
            slot.markdown(f'<div class="xray-report">{pane.content}</div>', unsafe_allow_html=True)
        case _:
            slot.caption(pane.content)


def _render_analyze_button(session: AnalysisSession, slot, key: str) -> bool:
    return slot.button(
        view.analyze_label(session),
        key=key,
        type="primary",
        disabled=view.analyze_disabled(session),
    )


def _run_analysis(session: AnalysisSession, button_slot, pane_slot) -> None:
    """Draw the LOADING state while the request is outstanding, then rerun with the outcome."""

    async def _drive() -> None:
        task = asyncio.create_task(session.start_analysis())
        await asyncio.sleep(0)
        _render_analyze_button(session, button_slot, WIDGET_ANALYZE_BUSY)
        _render_result_pane(session, pane_slot)
        await task

    asyncio.run(_drive())
    st.rerun()


def _render_workspace(session: AnalysisSession) -> None:
    left, right = st.columns(2)

    with left:
        st.subheader(UI_PREVIEW_HEADER)
        st.image(session.preview.content(), caption=UI_PREVIEW_CAPTION)
        analyze_col, reset_col = st.columns(2)
        button_slot = analyze_col.empty()
        analyze_clicked = _render_analyze_button(session, button_slot, WIDGET_ANALYZE)
        reset_col.button(UI_RESET, on_click=_on_reset, args=(session,))

    with right:
        st.subheader(UI_RESULTS_HEADER)
        pane_slot = st.empty()
        if analyze_clicked:
            _run_analysis(session, button_slot, pane_slot)
        _render_result_pane(session, pane_slot)


def render() -> None:
    st.set_page_config(page_title=UI_PAGE_TITLE, page_icon=UI_PAGE_ICON, layout="wide")
    config = _load_config()
    session = _session(config)

    st.markdown(UI_RTL_STYLE, unsafe_allow_html=True)
    st.title(UI_TITLE)
    st.write(UI_SUBTITLE)

    match view.show_upload(session):
        case True:
            _render_upload(session)
        case False:
            _render_workspace(session)

    banner = view.banner_error(session)
    if banner and not session.has_file:
        st.error(banner)

    st.markdown(f'<p class="xray-disclaimer">{UI_DISCLAIMER}</p>', unsafe_allow_html=True)


if __name__ == "__main__":
    render()
