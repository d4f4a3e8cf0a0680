from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from sitebuilder.agent.provider import GenerationProvider
from sitebuilder.core.db import engine
from sitebuilder.crud import WebsiteStore


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def get_website_store(session: Annotated[Session, Depends(get_db)]) -> WebsiteStore:
    return WebsiteStore(session)


def get_generation_provider() -> GenerationProvider:
    return GenerationProvider()


StoreDep = Annotated[WebsiteStore, Depends(get_website_store)]
ProviderDep = Annotated[GenerationProvider, Depends(get_generation_provider)]
