import logging
from typing import Optional, Protocol

import httpx

from app.core.exceptions import GenerationUnavailableError

logger = logging.getLogger(__name__)


class TextGenerationClient(Protocol):
    async def complete(self, system_prompt: str, user_message: str, *, response_format: Optional[dict] = None) -> str: ...


class OpenAIChatClient:
    """Single-shot chat completion call. No retries, no caching."""

    def __init__(
            self,
            api_key: str,
            base_url: str = "https://api.openai.com/v1/chat/completions",
            model: str = "gpt-4o-mini",
            timeout: float = 60.0,
            transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self.timeout = timeout
        self.transport = transport

    async def complete(self, system_prompt: str, user_message: str, *, response_format: Optional[dict] = None) -> str:
        if not self.api_key:
            raise GenerationUnavailableError("AI service is not configured: set OPENAI_API_KEY")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            "temperature": 0.7,
        }
        if response_format:
            payload["response_format"] = response_format

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.post(
                    self.base_url,
                    headers={
                        "Content-Type": "application/json",
                        "Authorization": f"Bearer {self.api_key}",
                    },
                    json=payload,
                )
        except httpx.TimeoutException:
            logger.warning("Chat completion request timed out after %ss", self.timeout)
            raise GenerationUnavailableError("AI service timed out")
        except httpx.HTTPError as e:
            logger.warning("Chat completion request failed: %s", e)
            raise GenerationUnavailableError("AI service is unreachable")

        try:
            result = response.json()
        except ValueError:
            result = None

        if response.status_code != 200:
            error_msg = f"AI service error: {response.status_code}"
            if isinstance(result, dict) and isinstance(result.get("error"), dict):
                error_msg += f" - {result['error'].get('message', '')}"
            logger.warning(error_msg)
            raise GenerationUnavailableError(error_msg)

        if not isinstance(result, dict):
            logger.warning("Chat completion envelope is not a JSON object")
            raise GenerationUnavailableError("AI service returned an unreadable response")
        if result.get("error"):
            logger.warning("Chat completion reported an error: %s", result["error"])
            raise GenerationUnavailableError("AI service reported an error")

        choices = result.get("choices") or []
        if not choices:
            raise GenerationUnavailableError("AI service returned no choices")

        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise GenerationUnavailableError("AI service returned no content")
        return content
