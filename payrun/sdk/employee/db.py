"""SQLAlchemy engine and session setup for the employee database."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def make_engine(db_url: str) -> Engine:
    # SQLite connections may be used from the payroll thread pool
    connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
    return create_engine(db_url, echo=False, future=True, connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    # Import models here so they are registered on Base
    from . import models as _models  # noqa: F401
    Base.metadata.create_all(bind=engine)
