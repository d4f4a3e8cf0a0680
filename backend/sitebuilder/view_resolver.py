from sitebuilder.models import (
    ComingSoonView,
    NotFoundView,
    PublishedView,
    ViewPayload,
    Website,
    WebsiteStatus,
    WebsiteWithSections,
)


def resolve_view(website: Website | None) -> ViewPayload:
    """
    Project a stored website onto what an anonymous visitor may see.

    Drafts collapse to a static coming-soon payload carrying none of the
    website's metadata or section content.
    """
    if website is None:
        return NotFoundView()
    if website.status != WebsiteStatus.PUBLISHED:
        return ComingSoonView()
    return PublishedView(website=WebsiteWithSections.model_validate(website))
