from fastapi import APIRouter

from sitebuilder.agent.fallbacks import AVAILABLE_SECTIONS

router = APIRouter()


@router.get("/available", response_model=list[str])
def read_available_sections() -> list[str]:
    """Known section names. Any other name is still accepted when generating."""
    return list(AVAILABLE_SECTIONS)
