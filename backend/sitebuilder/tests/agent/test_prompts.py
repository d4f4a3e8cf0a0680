from sitebuilder.agent.prompts.builder import (
    build_chat_prompt,
    build_section_digest,
    build_section_prompt,
    build_site_context,
    build_suggestion_prompt,
)
from sitebuilder.models import Section, Website


def _website() -> Website:
    return Website(name="Acme", description="Tools for makers", other_details="B2B")


def test_site_context_without_sections_omits_previous_block():
    context = build_site_context(_website(), [])

    assert context.startswith("Website Name: Acme")
    assert "Description: Tools for makers" in context
    assert "Additional Details: B2B" in context
    assert "Previous sections" not in context


def test_section_digest_truncates_content_in_stored_order():
    sections = [
        Section(name="Interactive Hero Section", content="h" * 500, order=0),
        Section(name="Careers Section", content="short", order=1),
    ]

    digest = build_section_digest(sections, digest_chars=200)

    assert digest == [
        f"1. Interactive Hero Section: {'h' * 200}...",
        "2. Careers Section: short...",
    ]


def test_site_context_lists_previous_sections():
    website = _website()
    website.upsert_section("Interactive Hero Section", "<h1>Hello</h1>")

    context = build_site_context(website, website.sections)

    assert "Previous sections generated:" in context
    assert "1. Interactive Hero Section: <h1>Hello</h1>..." in context


def test_section_prompt_names_the_target_section():
    prompt = build_section_prompt(_website(), "Stats / Metrics Section")

    assert 'the "Stats / Metrics Section" section' in prompt
    assert "{random}" in prompt
    assert "Previous sections" not in prompt


def test_chat_prompt_reuses_the_section_digest_and_quotes_the_message():
    website = _website()
    website.upsert_section("Careers Section", "We are hiring engineers")

    section_prompt = build_section_prompt(website, "Blog / Resources Section", website.sections)
    chat_prompt = build_chat_prompt(website, "Are you hiring?", website.sections)

    context = build_site_context(website, website.sections)
    assert section_prompt.startswith(context)
    assert chat_prompt.startswith(context)
    assert 'User asked: "Are you hiring?"' in chat_prompt


def test_suggestion_prompt_interpolates_name_and_description():
    prompt = build_suggestion_prompt("Acme", "Tools for makers")

    assert '"Acme"' in prompt
    assert '"Tools for makers"' in prompt
    assert "300 words" in prompt


def test_prompts_tolerate_braces_in_user_text():
    prompt = build_chat_prompt(_website(), "what about {this}?")

    assert "what about {this}?" in prompt
