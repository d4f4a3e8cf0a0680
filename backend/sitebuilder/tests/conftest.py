from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from sitebuilder.agent.provider import GenerationProvider
from sitebuilder.api.deps import get_db, get_generation_provider
from sitebuilder.core.db import init_db
from sitebuilder.crud import WebsiteStore
from sitebuilder.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session):
    return WebsiteStore(session)


@pytest.fixture
def llm():
    llm = MagicMock()
    llm.generate_text = AsyncMock(return_value="<section>Generated</section>")
    return llm


@pytest.fixture
def provider(llm):
    return GenerationProvider(llm=llm)


@pytest.fixture
def client(engine, provider):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_generation_provider] = lambda: provider
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
