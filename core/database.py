from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from core.config import settings


Base = declarative_base()


def enable_sqlite_savepoints(engine: Engine) -> None:
    # pysqlite starts transactions lazily and breaks SAVEPOINT; let SQLAlchemy emit BEGIN itself
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def build_engine(url: str, **kwargs) -> Engine:
    engine = create_engine(url, echo=False, future=True, **kwargs)
    if engine.dialect.name == "sqlite":
        enable_sqlite_savepoints(engine)
    return engine


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


# dependency
def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
