from sitebuilder.models import ComingSoonView, NotFoundView, PublishedView, Website
from sitebuilder.view_resolver import resolve_view


def _website_with_sections(count: int) -> Website:
    website = Website(
        name="Acme",
        description="SECRET-DESCRIPTION",
        other_details="SECRET-DETAILS",
    )
    for i in range(count):
        website.upsert_section(f"Section {i}", f"SECRET-CONTENT-{i}")
    return website


def test_missing_website_resolves_to_not_found():
    payload = resolve_view(None)

    assert isinstance(payload, NotFoundView)
    assert payload.error == "Website Not Found"


def test_draft_never_leaks_metadata_or_sections():
    for count in (0, 1, 5):
        payload = resolve_view(_website_with_sections(count))

        assert isinstance(payload, ComingSoonView)
        dumped = payload.model_dump_json()
        assert payload.status == "coming_soon"
        assert "SECRET" not in dumped
        assert "Acme" not in dumped


def test_published_website_is_shown_with_ordered_sections():
    website = _website_with_sections(3)
    website.transition_to_published()

    payload = resolve_view(website)

    assert isinstance(payload, PublishedView)
    assert payload.website.name == "Acme"
    assert payload.website.description == "SECRET-DESCRIPTION"
    assert [s.name for s in payload.website.sections] == ["Section 0", "Section 1", "Section 2"]
    assert payload.website.sections[2].content == "SECRET-CONTENT-2"


def test_resolve_view_does_not_mutate_the_website():
    website = _website_with_sections(2)
    before = [(s.name, s.content, s.order) for s in website.sections]

    resolve_view(website)

    assert website.status.value == "draft"
    assert [(s.name, s.content, s.order) for s in website.sections] == before
