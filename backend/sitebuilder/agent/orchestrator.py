import logging
import uuid

from sitebuilder.agent.provider import GenerationProvider
from sitebuilder.crud import WebsiteStore, get_website_or_404
from sitebuilder.errors import require_fields
from sitebuilder.models import Section

logger = logging.getLogger(__name__)


async def suggest_details(
    *, provider: GenerationProvider, name: str | None, description: str | None
) -> str:
    require_fields("Name and description are required", name, description)
    return await provider.suggest_details(name, description)


async def generate_section(
    *,
    store: WebsiteStore,
    provider: GenerationProvider,
    website_id: uuid.UUID | str | None,
    section_name: str | None,
) -> Section:
    """
    Generate (or regenerate) one named section and upsert it into the website.

    The prompt digests the sections stored before this call. Generating a
    name that already exists replaces its content and keeps its position.
    """
    require_fields(
        "Website ID and section are required",
        str(website_id) if website_id else None,
        section_name,
    )
    website = get_website_or_404(store=store, website_id=website_id)

    content = await provider.generate_section(website, section_name)

    website.upsert_section(section_name, content)
    website = store.save(website)
    section = website.get_section(section_name)
    logger.info(
        "Stored section %r (order %s) on website %s", section_name, section.order, website.id
    )
    return section


async def chat_with_website(
    *,
    store: WebsiteStore,
    provider: GenerationProvider,
    website_id: uuid.UUID | str | None,
    message: str | None,
) -> str:
    """Answer a visitor message from the stored site content. Nothing is persisted."""
    require_fields(
        "Website ID and message are required",
        str(website_id) if website_id else None,
        message,
    )
    website = get_website_or_404(store=store, website_id=website_id)
    return await provider.chat_reply(website, message)
