"""
SQLAlchemy engine factory and declarative base for the score history.
"""
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from eternal_quest.config import DATABASE_URL

Base = declarative_base()


def make_engine(url: Optional[str] = None) -> Engine:
    """Create an engine for url (default: EQ_DATABASE_URL); SQLite connections may be shared across threads"""
    url = url or DATABASE_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def init_db(bind: Engine) -> None:
    """Create history tables on bind if they do not exist"""
    # Import models so they register with Base
    from eternal_quest.modules.history import models  # noqa: F401

    Base.metadata.create_all(bind=bind)
