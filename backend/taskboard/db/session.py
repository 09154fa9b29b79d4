from pathlib import Path
from sqlalchemy.engine import make_url
from sqlmodel import SQLModel, create_engine, Session
from ..core.config import settings

def _engine_kwargs(url: str) -> dict:
    if make_url(url).get_backend_name() == "sqlite":
        # sync routes run on the threadpool, not the thread that opened the connection
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}

engine = create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, **_engine_kwargs(settings.DATABASE_URL))

def init_db() -> None:
    from . import models  # noqa: F401
    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session
