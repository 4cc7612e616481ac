"""OpenAIAnalysisClient — OpenAI GPT-4o vision backend."""
from typing import Optional

from openai import AsyncOpenAI

from xray_assist.analysis.client import AnalysisClient
from xray_assist.constants import PROMPT


class OpenAIAnalysisClient(AnalysisClient):

    name = "OpenAI"

    async def _request(self, encoded_image: str, media_type: str) -> Optional[str]:
        client = AsyncOpenAI(api_key=self._api_key)
        response = await client.chat.completions.create(
            model=self._model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:{media_type};base64,{encoded_image}"},
                        },
                        {"type": "text", "text": PROMPT},
                    ],
                }
            ],
        )
        return response.choices[0].message.content
