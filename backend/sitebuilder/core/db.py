import logging

from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine

from sitebuilder.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # FastAPI serves sync routes from a threadpool.
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL)


def init_db(db_engine: Engine) -> None:
    # Importing the models registers their tables on SQLModel.metadata.
    from sitebuilder import models  # noqa: F401

    SQLModel.metadata.create_all(db_engine)
    logger.info("Database tables ensured on %s", db_engine.url.render_as_string(hide_password=True))
