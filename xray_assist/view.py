"""Pure view-model helpers — what the page shows for a given session state."""
import html
from dataclasses import dataclass

from xray_assist.constants import UI_ANALYZE, UI_ANALYZING, UI_LOADING, UI_PLACEHOLDER
from xray_assist.session import AnalysisSession, Status


@dataclass(frozen=True)
class ResultPane:
    kind: str  # "spinner" | "error" | "report" | "placeholder"
    content: str


def render_report_html(text: str) -> str:
    """Escape model output and keep its line breaks; nothing it returns is trusted as markup."""
    escaped = html.escape(text.replace("\r\n", "\n"))
    return escaped.replace("\n", "<br />")


def result_pane(session: AnalysisSession) -> ResultPane:
    match session.status:
        case Status.LOADING:
            return ResultPane("spinner", UI_LOADING)
        case Status.ERROR:
            return ResultPane("error", session.error)
        case Status.SUCCESS:
            return ResultPane("report", render_report_html(session.result))
        case _:
            return ResultPane("placeholder", UI_PLACEHOLDER)


def show_upload(session: AnalysisSession) -> bool:
    return session.preview is None


def analyze_disabled(session: AnalysisSession) -> bool:
    return session.is_loading or not session.has_file


def analyze_label(session: AnalysisSession) -> str:
    return UI_ANALYZING if session.is_loading else UI_ANALYZE


def banner_error(session: AnalysisSession) -> str:
    """Error shown under the form (also when no file is selected yet)."""
    match (session.error, session.status):
        case ("", _) | (_, Status.LOADING):
            return ""
        case (message, _):
            return message
