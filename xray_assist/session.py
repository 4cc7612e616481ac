"""AnalysisSession — the page's state machine, independent of the UI toolkit.

    IDLE ──select_file──▶ IDLE (with file) ──start_analysis──▶ LOADING
    LOADING ──resolved──▶ SUCCESS | ERROR
    any ──reset──▶ IDLE (empty)

select_file, start_analysis and reset are the only mutation entry points.
"""
import enum
import logging
import time
from typing import Optional

from xray_assist import ingest
from xray_assist.analysis.client import AnalysisClient
from xray_assist.constants import (
    MSG_ANALYSIS_BUSY,
    MSG_ANALYSIS_CANCELLED,
    MSG_ANALYSIS_FAIL,
    MSG_ANALYSIS_FAILED,
    MSG_ANALYSIS_OK,
    MSG_ANALYSIS_STALE,
    MSG_ANALYSIS_START,
    MSG_FILE_ACCEPTED,
    MSG_FILE_REJECTED,
    MSG_UNEXPECTED_ERROR,
    MSG_UNSUPPORTED_TYPE,
    PROMPT_VERSION,
)
from xray_assist.errors import UnknownFailure, UnsupportedMediaType, XRayAssistError
from xray_assist.ingest import PreviewHandle, SelectedImage

logger = logging.getLogger(__name__)


class Status(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


def failure_message(exc: BaseException) -> str:
    """Localized wrapper shown to the user for a failed analysis."""
    return MSG_ANALYSIS_FAILED % (str(exc) or MSG_UNEXPECTED_ERROR)


class AnalysisSession:

    def __init__(self, client: AnalysisClient) -> None:
        self._client = client
        self._status = Status.IDLE
        self._image: Optional[SelectedImage] = None
        self._preview: Optional[PreviewHandle] = None
        self._result = ""
        self._error = ""
        # bumped on every new selection or reset; in-flight results from an
        # older generation are dropped
        self._generation = 0

    # ── read-only state ───────────────────────────────────────────────────────

    @property
    def status(self) -> Status:
        return self._status

    @property
    def image(self) -> Optional[SelectedImage]:
        return self._image

    @property
    def preview(self) -> Optional[PreviewHandle]:
        return self._preview

    @property
    def result(self) -> str:
        return self._result

    @property
    def error(self) -> str:
        return self._error

    @property
    def has_file(self) -> bool:
        return self._image is not None

    @property
    def is_loading(self) -> bool:
        return self._status is Status.LOADING

    # ── transitions ───────────────────────────────────────────────────────────

    def select_file(self, image: SelectedImage) -> None:
        try:
            ingest.validate(image)
        except UnsupportedMediaType as exc:
            logger.warning(MSG_FILE_REJECTED, image.name, exc.media_type)
            self._error = MSG_UNSUPPORTED_TYPE
            self._status = Status.ERROR
            return

        logger.info(MSG_FILE_ACCEPTED, image.name, image.media_type)
        self._release_preview()
        self._generation += 1
        self._image = image
        self._preview = ingest.make_preview(image)
        self._result = ""
        self._error = ""
        self._status = Status.IDLE

    async def start_analysis(self) -> None:
        match (self._image, self._status):
            case (None, _):
                return
            case (_, Status.LOADING):
                logger.warning(MSG_ANALYSIS_BUSY)
                return
            case (image, _):
                pass

        generation = self._generation
        self._status = Status.LOADING
        self._error = ""
        started = time.monotonic()
        logger.info(MSG_ANALYSIS_START, self._client.name, image.name, PROMPT_VERSION)

        try:
            payload = ingest.encode(image)
            text = await self._client.analyze(payload, ingest.normalize_media_type(image.media_type))
        except XRayAssistError as exc:
            self._finish_error(generation, exc, started)
        except Exception as exc:
            self._finish_error(generation, UnknownFailure(str(exc)), started)
        else:
            self._finish_success(generation, text, started)
        finally:
            self._leave_loading(generation)

    def reset(self) -> None:
        self._release_preview()
        self._generation += 1
        self._image = None
        self._result = ""
        self._error = ""
        self._status = Status.IDLE

    # ── internals ─────────────────────────────────────────────────────────────

    def _finish_success(self, generation: int, text: str, started: float) -> None:
        match generation == self._generation:
            case False:
                logger.info(MSG_ANALYSIS_STALE)
            case True:
                logger.info(MSG_ANALYSIS_OK, time.monotonic() - started, len(text))
                self._result = text
                self._status = Status.SUCCESS

    def _finish_error(self, generation: int, exc: XRayAssistError, started: float) -> None:
        logger.error(MSG_ANALYSIS_FAIL, time.monotonic() - started, exc)
        match generation == self._generation:
            case False:
                logger.info(MSG_ANALYSIS_STALE)
            case True:
                self._error = failure_message(exc)
                self._status = Status.ERROR

    def _leave_loading(self, generation: int) -> None:
        """Cancelled runs end here still LOADING; fall back to IDLE with the file kept."""
        match (generation == self._generation, self._status):
            case (True, Status.LOADING):
                logger.warning(MSG_ANALYSIS_CANCELLED)
                self._status = Status.IDLE
            case _:
                pass

    def _release_preview(self) -> None:
        match self._preview:
            case None:
                pass
            case preview:
                preview.release()
                self._preview = None
