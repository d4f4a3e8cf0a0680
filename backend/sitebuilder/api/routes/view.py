from fastapi import APIRouter
from fastapi.responses import JSONResponse

from sitebuilder.api.deps import StoreDep
from sitebuilder.models import NotFoundView
from sitebuilder.view_resolver import resolve_view

router = APIRouter()


@router.get("/{website_id}")
def view_website(website_id: str, store: StoreDep) -> JSONResponse:
    """Public page payload: coming-soon for drafts, the full site once published."""
    payload = resolve_view(store.find(website_id))
    status_code = 404 if isinstance(payload, NotFoundView) else 200
    return JSONResponse(status_code=status_code, content=payload.model_dump(mode="json"))
