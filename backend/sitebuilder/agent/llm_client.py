import logging
import re

from openai import AsyncOpenAI

from sitebuilder.core.config import settings

logger = logging.getLogger(__name__)


def strip_code_fences(text: str) -> str:
    if not text:
        return ""
    fenced = re.match(r"^\s*```[a-zA-Z0-9_-]*\s*([\s\S]*?)\s*```\s*$", text)
    if fenced:
        return fenced.group(1).strip()
    return text.strip()


class LLMClient:
    """Thin text-completion client for any endpoint speaking the OpenAI API spec."""

    def __init__(
        self,
        model_name: str | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
    ):
        self.model_name = model_name or settings.MODEL_DEFAULT

        # Callers fall back to canned content on failure, so the SDK must not retry on its own.
        self.client = AsyncOpenAI(
            base_url=base_url or settings.LLM_BASE_URL,
            api_key=api_key or settings.LLM_API_KEY,
            timeout=timeout or settings.LLM_TIMEOUT_SECONDS,
            max_retries=0,
        )

    async def generate_text(
        self,
        prompt: str,
        *,
        max_tokens: int,
        temperature: float | None = None,
    ) -> str:
        """
        Send `prompt` as a single user message and return the reply text.
        Raises on provider errors and on responses without usable content.
        """
        logger.info("Issuing text request to model %s (max_tokens=%s)...", self.model_name, max_tokens)
        response = await self.client.chat.completions.create(
            model=self.model_name,
            messages=[{"role": "user", "content": prompt}],
            temperature=settings.LLM_TEMPERATURE if temperature is None else temperature,
            max_tokens=max_tokens,
        )
        if not getattr(response, "choices", None):
            logger.error("Received 0 choices from %s: %s", self.model_name, response)
            raise ValueError(f"Provider {self.model_name} returned no output")

        # Returned unstripped; callers measure the reply as the model sent it.
        text_response = response.choices[0].message.content or ""
        if not text_response.strip():
            raise ValueError("Model returned empty content")
        logger.info("Received %s characters from %s.", len(text_response), self.model_name)
        return text_response
