"""AnalysisClient — abstract base for X-ray report backends."""
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional

from xray_assist.constants import MSG_EMPTY_RESPONSE, MSG_SERVICE_ERROR, MSG_SERVICE_TIMEOUT
from xray_assist.errors import ServiceFailure

logger = logging.getLogger(__name__)


class AnalysisClient(ABC):
    """Single-shot request of (image, media type, prompt, model) → report text.

    Subclasses implement `_request`. Whatever it raises is logged and re-raised
    as ServiceFailure with the underlying message, so callers only ever see
    one error kind from this layer. No retries.
    """

    name = "model"

    def __init__(self, api_key: str, model: str, timeout: Optional[int] = None) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout

    @property
    def model(self) -> str:
        return self._model

    async def analyze(self, encoded_image: str, media_type: str) -> str:
        try:
            text = await asyncio.wait_for(
                self._guarded_request(encoded_image, media_type), timeout=self._timeout
            )
        except asyncio.TimeoutError as exc:
            # only wait_for expiry gets here; backend errors are already ServiceFailure
            logger.exception(MSG_SERVICE_ERROR, self.name)
            raise ServiceFailure(MSG_SERVICE_TIMEOUT % self._timeout) from exc

        match text:
            case str() as t if t.strip():
                return t
            case _:
                raise ServiceFailure(MSG_EMPTY_RESPONSE)

    async def _guarded_request(self, encoded_image: str, media_type: str) -> Optional[str]:
        try:
            return await self._request(encoded_image, media_type)
        except Exception as exc:
            logger.exception(MSG_SERVICE_ERROR, self.name)
            raise ServiceFailure(str(exc) or type(exc).__name__) from exc

    @abstractmethod
    async def _request(self, encoded_image: str, media_type: str) -> Optional[str]:
        """Send the prompt and base64 image, return the raw response text."""
        ...
