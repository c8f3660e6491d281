from contextlib import contextmanager
import uuid

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from tourops.config import get_settings

settings = get_settings()

db_url = settings.database_url

connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}

engine = create_engine(db_url, connect_args=connect_args)


# Without this, ON DELETE CASCADE doesn't work on SQLite
@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    if engine.dialect.name != "sqlite":
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def new_id() -> str:
    """Opaque primary key for every planner table."""
    return str(uuid.uuid4())


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session):
    """Run a multi-statement write as one unit of work.

    Commits once when the block exits cleanly; any exception rolls back
    every statement issued inside the block and is re-raised.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
