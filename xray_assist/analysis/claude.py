"""ClaudeAnalysisClient — Anthropic Claude vision backend."""
from typing import Optional

from anthropic import AsyncAnthropic

from xray_assist.analysis.client import AnalysisClient
from xray_assist.constants import CLAUDE_MAX_TOKENS, PROMPT


class ClaudeAnalysisClient(AnalysisClient):

    name = "Claude"

    async def _request(self, encoded_image: str, media_type: str) -> Optional[str]:
        client = AsyncAnthropic(api_key=self._api_key)
        message = await client.messages.create(
            model=self._model,
            max_tokens=CLAUDE_MAX_TOKENS,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": media_type,
                                "data": encoded_image,
                            },
                        },
                        {"type": "text", "text": PROMPT},
                    ],
                }
            ],
        )
        return "".join(block.text for block in message.content if block.type == "text")
