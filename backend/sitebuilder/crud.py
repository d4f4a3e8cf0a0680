import logging
import uuid

from sqlmodel import Session, select

from sitebuilder.errors import NotFoundError, require_fields
from sitebuilder.models import Website, WebsiteCreate

logger = logging.getLogger(__name__)


def _parse_website_id(website_id: uuid.UUID | str | None) -> uuid.UUID | None:
    if isinstance(website_id, uuid.UUID):
        return website_id
    if not website_id:
        return None
    try:
        return uuid.UUID(str(website_id))
    except ValueError:
        return None


class WebsiteStore:
    """Persistence for website aggregates (a website and its sections)."""

    def __init__(self, session: Session):
        self.session = session

    def find(self, website_id: uuid.UUID | str | None) -> Website | None:
        """Get a website by ID. Identifiers that are not UUIDs resolve to nothing."""
        parsed = _parse_website_id(website_id)
        if parsed is None:
            return None
        return self.session.get(Website, parsed)

    def find_all(self) -> list[Website]:
        """Get all websites, newest first."""
        statement = select(Website).order_by(Website.created_at.desc())  # type: ignore[union-attr]
        return list(self.session.exec(statement).all())

    def save(self, website: Website) -> Website:
        """Insert or update a website together with its sections."""
        self.session.add(website)
        self.session.commit()
        self.session.refresh(website)
        return website


def create_website(*, store: WebsiteStore, website_in: WebsiteCreate) -> Website:
    require_fields(
        "Name, description, and other details are required",
        website_in.name,
        website_in.description,
        website_in.other_details,
    )
    website = Website(
        name=website_in.name,
        description=website_in.description,
        other_details=website_in.other_details,
    )
    website = store.save(website)
    logger.info("Created website %s (%s)", website.id, website.name)
    return website


def get_website_or_404(*, store: WebsiteStore, website_id: uuid.UUID | str | None) -> Website:
    website = store.find(website_id)
    if website is None:
        raise NotFoundError("Website not found")
    return website


def update_section_content(
    *,
    store: WebsiteStore,
    website_id: uuid.UUID | str | None,
    section_name: str | None,
    new_content: str | None,
) -> bool:
    """Overwrite the content of an existing section. Unknown section names are not created."""
    require_fields(
        "Website ID, section name, and new content are required",
        str(website_id) if website_id else None,
        section_name,
        new_content,
    )
    website = get_website_or_404(store=store, website_id=website_id)
    if website.get_section(section_name) is None:
        raise NotFoundError("Section not found")

    website.upsert_section(section_name, new_content)
    store.save(website)
    logger.info("Updated section %r on website %s", section_name, website.id)
    return True


def publish_website(*, store: WebsiteStore, website_id: uuid.UUID | str | None) -> Website:
    require_fields("Website ID is required", str(website_id) if website_id else None)
    website = get_website_or_404(store=store, website_id=website_id)
    if website.is_published:
        logger.info("Website %s is already published", website.id)
        return website

    website.transition_to_published()
    website = store.save(website)
    logger.info("Published website %s", website.id)
    return website
