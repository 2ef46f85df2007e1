from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.config_loader import load_config

engine: Optional[Engine] = None
SessionLocal: Optional[sessionmaker] = None


def configure(url: str) -> Engine:
    """Bind the engine and session factory to ``url``, replacing any earlier binding."""
    global engine, SessionLocal
    if engine is not None:
        engine.dispose()
    engine = create_engine(url, pool_pre_ping=True)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return engine


def get_engine() -> Engine:
    if engine is None:
        # Nothing configured: config.yaml, overridden by DATABASE_URL when set
        configure(load_config().database.url)
    return engine


def get_session_factory() -> sessionmaker:
    get_engine()
    return SessionLocal
