from fastapi import APIRouter

from sitebuilder.api.routes import sections, websites

api_router = APIRouter()
api_router.include_router(websites.router, prefix="/websites", tags=["websites"])
api_router.include_router(sections.router, prefix="/sections", tags=["sections"])
