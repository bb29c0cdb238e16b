import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.config_loader import get_config


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # FastAPI runs sync endpoints on a threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_size": 10, "max_overflow": 20}


DATABASE_URL = os.environ.get("DATABASE_URL") or get_config().database.url

engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
