"""
Prompt assembly for the generation provider.

Every function here is a pure function of its arguments. The site context
block is shared between section generation and chat so both see the same
digest of previously generated sections.
"""

from collections.abc import Sequence

from sitebuilder.agent.prompts.chat import CHAT_PROMPT_TEMPLATE
from sitebuilder.agent.prompts.section import SECTION_PROMPT_TEMPLATE
from sitebuilder.agent.prompts.suggestion import SUGGESTION_PROMPT_TEMPLATE
from sitebuilder.core.config import settings
from sitebuilder.models import SectionBase, WebsiteBase


def build_section_digest(
    sections: Sequence[SectionBase], *, digest_chars: int | None = None
) -> list[str]:
    limit = settings.SECTION_DIGEST_CHARS if digest_chars is None else digest_chars
    return [
        f"{index}. {section.name}: {(section.content or '')[:limit]}..."
        for index, section in enumerate(sections, start=1)
    ]


def build_site_context(
    website: WebsiteBase,
    sections: Sequence[SectionBase] = (),
    *,
    digest_chars: int | None = None,
) -> str:
    lines = [
        f"Website Name: {website.name}",
        f"Description: {website.description}",
        f"Additional Details: {website.other_details}",
    ]
    digest = build_section_digest(sections, digest_chars=digest_chars)
    if digest:
        lines += ["", "Previous sections generated:", *digest]
    return "\n".join(lines)


def build_suggestion_prompt(name: str, description: str) -> str:
    return SUGGESTION_PROMPT_TEMPLATE.format(name=name, description=description)


def build_section_prompt(
    website: WebsiteBase,
    section_name: str,
    previous_sections: Sequence[SectionBase] = (),
) -> str:
    context = build_site_context(website, previous_sections)
    return f"{context}\n\n{SECTION_PROMPT_TEMPLATE.format(section_name=section_name)}"


def build_chat_prompt(
    website: WebsiteBase,
    message: str,
    sections: Sequence[SectionBase] = (),
) -> str:
    context = build_site_context(website, sections)
    return f"{context}\n\n{CHAT_PROMPT_TEMPLATE.format(message=message)}"
