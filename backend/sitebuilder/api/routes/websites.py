from typing import Any

from fastapi import APIRouter, HTTPException

from sitebuilder.agent.orchestrator import chat_with_website, generate_section, suggest_details
from sitebuilder.api.deps import ProviderDep, StoreDep
from sitebuilder.crud import (
    create_website,
    get_website_or_404,
    publish_website,
    update_section_content,
)
from sitebuilder.errors import SiteBuilderError
from sitebuilder.models import (
    ChatRequest,
    ChatResponse,
    GenerateSectionRequest,
    GenerateSectionResponse,
    PublishResponse,
    SuccessResponse,
    SuggestDetailsRequest,
    SuggestDetailsResponse,
    UpdateSectionRequest,
    WebsiteCreate,
    WebsitePublic,
    WebsiteWithSections,
)

router = APIRouter()


def _http_error(exc: SiteBuilderError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=str(exc))


@router.post("/", response_model=WebsiteWithSections, status_code=201)
def create_new_website(*, store: StoreDep, website_in: WebsiteCreate) -> Any:
    try:
        website = create_website(store=store, website_in=website_in)
    except SiteBuilderError as exc:
        raise _http_error(exc) from exc
    return WebsiteWithSections.model_validate(website)


@router.get("/", response_model=list[WebsitePublic])
def read_websites(store: StoreDep) -> Any:
    return [WebsitePublic.model_validate(website) for website in store.find_all()]


@router.post("/suggestions", response_model=SuggestDetailsResponse)
async def suggest_website_details(
    *, provider: ProviderDep, payload: SuggestDetailsRequest
) -> Any:
    """Draft extra website details from a name and description. Nothing is stored."""
    try:
        suggestion = await suggest_details(
            provider=provider, name=payload.name, description=payload.description
        )
    except SiteBuilderError as exc:
        raise _http_error(exc) from exc
    return SuggestDetailsResponse(suggestion=suggestion)


@router.get("/{website_id}", response_model=WebsiteWithSections)
def read_website(website_id: str, store: StoreDep) -> Any:
    try:
        website = get_website_or_404(store=store, website_id=website_id)
    except SiteBuilderError as exc:
        raise _http_error(exc) from exc
    return WebsiteWithSections.model_validate(website)


@router.post("/{website_id}/sections", response_model=GenerateSectionResponse)
async def generate_website_section(
    *,
    website_id: str,
    store: StoreDep,
    provider: ProviderDep,
    payload: GenerateSectionRequest,
) -> Any:
    """
    Generate or regenerate a named section.

    Provider failures never surface here: the response then carries the
    canned content for that section name.
    """
    try:
        section = await generate_section(
            store=store,
            provider=provider,
            website_id=website_id,
            section_name=payload.section_name,
        )
    except SiteBuilderError as exc:
        raise _http_error(exc) from exc
    return GenerateSectionResponse(section=section.name, content=section.content)


@router.put("/{website_id}/sections", response_model=SuccessResponse)
def update_website_section(
    *, website_id: str, store: StoreDep, payload: UpdateSectionRequest
) -> Any:
    try:
        success = update_section_content(
            store=store,
            website_id=website_id,
            section_name=payload.section_name,
            new_content=payload.new_content,
        )
    except SiteBuilderError as exc:
        raise _http_error(exc) from exc
    return SuccessResponse(success=success)


@router.post("/{website_id}/publish", response_model=PublishResponse)
def publish(website_id: str, store: StoreDep) -> Any:
    try:
        publish_website(store=store, website_id=website_id)
    except SiteBuilderError as exc:
        raise _http_error(exc) from exc
    return PublishResponse()


@router.post("/{website_id}/chat", response_model=ChatResponse)
async def chat(
    *, website_id: str, store: StoreDep, provider: ProviderDep, payload: ChatRequest
) -> Any:
    try:
        reply = await chat_with_website(
            store=store, provider=provider, website_id=website_id, message=payload.message
        )
    except SiteBuilderError as exc:
        raise _http_error(exc) from exc
    return ChatResponse(reply=reply)
