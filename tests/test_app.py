"""TDD: Streamlit page wiring tests written FIRST"""
import asyncio
import base64
import io
import logging
from pathlib import Path

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest
from unittest.mock import AsyncMock, MagicMock

from xray_assist import app
from xray_assist.constants import (
    MSG_UNSUPPORTED_TYPE,
    STATE_SESSION,
    STATE_UPLOADER,
    UI_ANALYZE,
    UI_ANALYZING,
    UI_LOADING,
    UI_RESET,
    WIDGET_ANALYZE,
    WIDGET_ANALYZE_BUSY,
)
from xray_assist.errors import ServiceFailure
from xray_assist.ingest import SelectedImage
from xray_assist.session import AnalysisSession, Status

APP_PATH = str(Path(__file__).resolve().parent.parent / "xray_assist" / "app.py")

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


def make_client(result="report", error=None) -> MagicMock:
    client = MagicMock()
    client.name = "stub"
    client.analyze = AsyncMock(return_value=result, side_effect=error)
    return client


def make_image(media_type: str = "image/png") -> SelectedImage:
    return SelectedImage(name="scan.png", media_type=media_type, source=io.BytesIO(PNG_BYTES))


@pytest.fixture(autouse=True)
def page_env(monkeypatch):
    monkeypatch.setattr("xray_assist.config.load_dotenv", lambda **_: None)
    monkeypatch.setenv("API_KEY", "test-key")
    for name in ("ANALYSIS_PROVIDER", "ANALYSIS_MODEL", "ANALYSIS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    st.cache_resource.clear()
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.setLevel(level)
    root.handlers[:] = handlers
    st.cache_resource.clear()


def open_page(session: AnalysisSession | None = None) -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=10)
    if session is not None:
        at.session_state[STATE_SESSION] = session
        at.session_state[STATE_UPLOADER] = 0
    return at.run()


def button(at: AppTest, label: str):
    return next(b for b in at.button if b.label == label)


# ── page runs ─────────────────────────────────────────────────────────────────


def test_page_without_credential_does_not_start(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)

    at = open_page()

    assert at.exception
    assert "API_KEY" in at.exception[0].value


def test_fresh_page_shows_upload_only():
    at = open_page()

    assert not at.exception
    assert at.session_state[STATE_UPLOADER] == 0
    assert len(at.button) == 0
    assert len(at.error) == 0


def test_analyze_click_shows_report():
    client = make_client("line 1\nline 2")
    session = AnalysisSession(client)
    session.select_file(make_image())

    at = open_page(session)
    at.button(key=WIDGET_ANALYZE).click().run()

    assert not at.exception
    assert session.status is Status.SUCCESS
    client.analyze.assert_awaited_once()
    assert any("line 1<br />line 2" in m.value for m in at.markdown)
    assert at.button(key=WIDGET_ANALYZE).label == UI_ANALYZE


def test_analyze_failure_shown_once_in_result_pane():
    session = AnalysisSession(make_client(error=ServiceFailure("timeout")))
    session.select_file(make_image())

    at = open_page(session)
    at.button(key=WIDGET_ANALYZE).click().run()

    errors = [e.value for e in at.error]
    assert len(errors) == 1
    assert "timeout" in errors[0]


def test_rejected_file_banner_shown_without_file():
    session = AnalysisSession(make_client())
    session.select_file(make_image("image/gif"))

    at = open_page(session)

    assert [e.value for e in at.error] == [MSG_UNSUPPORTED_TYPE]


def test_reset_click_clears_session_and_renews_uploader():
    session = AnalysisSession(make_client())
    session.select_file(make_image())

    at = open_page(session)
    button(at, UI_RESET).click().run()

    assert session.status is Status.IDLE
    assert not session.has_file
    assert at.session_state[STATE_UPLOADER] == 1
    assert len(at.button) == 0


# ── callbacks ─────────────────────────────────────────────────────────────────


def test_upload_callback_selects_file(monkeypatch):
    upload = io.BytesIO(PNG_BYTES)
    upload.name = "pano.webp"
    upload.type = "image/webp"
    monkeypatch.setattr(app.st, "session_state", {"xray_upload_0": upload})
    session = AnalysisSession(make_client())

    app._on_upload(session, "xray_upload_0")

    assert session.image.name == "pano.webp"
    assert session.preview.content() == PNG_BYTES


def test_upload_callback_ignores_cleared_control(monkeypatch):
    monkeypatch.setattr(app.st, "session_state", {"xray_upload_0": None})
    session = AnalysisSession(make_client())

    app._on_upload(session, "xray_upload_0")

    assert not session.has_file
    assert session.status is Status.IDLE


def test_reset_callback_bumps_uploader_generation(monkeypatch):
    state = {STATE_UPLOADER: 3}
    monkeypatch.setattr(app.st, "session_state", state)
    session = AnalysisSession(make_client())
    session.select_file(make_image())

    app._on_reset(session)

    assert not session.has_file
    assert state[STATE_UPLOADER] == 4


def test_run_analysis_draws_loading_state_before_outcome(monkeypatch):
    async def slow_analyze(encoded, media_type):
        await asyncio.sleep(0.01)
        return "report"

    client = make_client()
    client.analyze = AsyncMock(side_effect=slow_analyze)
    session = AnalysisSession(client)
    session.select_file(make_image())
    button_slot, pane_slot = MagicMock(), MagicMock()
    reruns = []
    monkeypatch.setattr(app.st, "rerun", lambda: reruns.append(True))

    app._run_analysis(session, button_slot, pane_slot)

    button_slot.button.assert_called_once_with(
        UI_ANALYZING, key=WIDGET_ANALYZE_BUSY, type="primary", disabled=True
    )
    pane_slot.info.assert_called_once()
    assert pane_slot.info.call_args.args[0] == UI_LOADING
    assert session.status is Status.SUCCESS
    assert reruns == [True]
