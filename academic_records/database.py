# academic_records/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()
SessionLocal = sessionmaker(autocommit=False, autoflush=False)
engine = None


def init_db(database_url: str):
    """Create the engine, bind SessionLocal to it and create missing tables."""
    global engine
    kwargs = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # in-memory sqlite only lives as long as its single connection
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    engine = create_engine(database_url, **kwargs)
    SessionLocal.configure(bind=engine)

    from academic_records import models  # noqa: F401  registers the tables
    Base.metadata.create_all(bind=engine)
    return engine
