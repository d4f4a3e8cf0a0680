import logging
from enum import Enum

from sitebuilder.agent.fallbacks import CHAT_FALLBACK_REPLY, fallback_section, fallback_suggestion
from sitebuilder.agent.llm_client import LLMClient, strip_code_fences
from sitebuilder.agent.prompts.builder import (
    build_chat_prompt,
    build_section_prompt,
    build_suggestion_prompt,
)
from sitebuilder.core.config import settings
from sitebuilder.errors import UpstreamUnavailableError
from sitebuilder.models import Website

logger = logging.getLogger(__name__)


class GenerationIntent(str, Enum):
    SUGGESTION = "suggestion"
    SECTION = "section"
    CHAT = "chat"

    @property
    def max_tokens(self) -> int:
        return {
            GenerationIntent.SUGGESTION: settings.SUGGESTION_MAX_TOKENS,
            GenerationIntent.SECTION: settings.SECTION_MAX_TOKENS,
            GenerationIntent.CHAT: settings.CHAT_MAX_TOKENS,
        }[self]


class GenerationProvider:
    """
    Best-effort content generation on top of an LLMClient.

    `complete` never raises: provider errors, empty replies and suggestions
    shorter than `min_suggestion_chars` are logged and replaced with the
    caller-supplied fallback. There is no retry.
    """

    def __init__(self, llm: LLMClient | None = None, *, min_suggestion_chars: int | None = None):
        self.llm = llm or LLMClient()
        self.min_suggestion_chars = (
            settings.SUGGESTION_MIN_CHARS if min_suggestion_chars is None else min_suggestion_chars
        )

    async def _generate(self, prompt: str, intent: GenerationIntent) -> str:
        try:
            text = await self.llm.generate_text(prompt, max_tokens=intent.max_tokens)
        except Exception as exc:
            raise UpstreamUnavailableError(str(exc)) from exc

        if intent is GenerationIntent.SECTION:
            text = strip_code_fences(text)
        if not text.strip():
            raise UpstreamUnavailableError("Model returned empty content")
        if intent is GenerationIntent.SUGGESTION and len(text) < self.min_suggestion_chars:
            raise UpstreamUnavailableError(
                f"Suggestion too short ({len(text)} < {self.min_suggestion_chars} characters)"
            )
        return text

    async def complete(self, prompt: str, intent: GenerationIntent, *, fallback: str) -> str:
        try:
            return await self._generate(prompt, intent)
        except UpstreamUnavailableError as exc:
            logger.warning("Generation for intent %s failed; using fallback: %s", intent.value, exc)
            return fallback

    async def suggest_details(self, name: str, description: str) -> str:
        return await self.complete(
            build_suggestion_prompt(name, description),
            GenerationIntent.SUGGESTION,
            fallback=fallback_suggestion(name, description),
        )

    async def generate_section(self, website: Website, section_name: str) -> str:
        """Draft markup for `section_name` using the sections the website already has as context."""
        return await self.complete(
            build_section_prompt(website, section_name, website.sections),
            GenerationIntent.SECTION,
            fallback=fallback_section(section_name),
        )

    async def chat_reply(self, website: Website, message: str) -> str:
        return await self.complete(
            build_chat_prompt(website, message, website.sections),
            GenerationIntent.CHAT,
            fallback=CHAT_FALLBACK_REPLY,
        )
