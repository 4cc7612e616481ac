"""GeminiAnalysisClient — Google Gemini backend (default)."""
import base64
from typing import Optional

from google import genai
from google.genai import types

from xray_assist.analysis.client import AnalysisClient
from xray_assist.constants import PROMPT


class GeminiAnalysisClient(AnalysisClient):

    name = "Gemini"

    async def _request(self, encoded_image: str, media_type: str) -> Optional[str]:
        client = genai.Client(api_key=self._api_key)
        image_part = types.Part.from_bytes(
            data=base64.b64decode(encoded_image),
            mime_type=media_type,
        )
        response = await client.aio.models.generate_content(
            model=self._model,
            contents=[image_part, PROMPT],
        )
        return response.text
