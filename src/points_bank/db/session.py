"""
Engine and session factory construction.

Nothing here is global: create_app() (or a test fixture) builds the engine
once and hands the session factory to every service that needs the store.
"""

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()

# Execution option marking a connection whose transaction must hold the
# SQLite writer lock from BEGIN.
WRITER_OPTION = "sqlite_immediate"


def _configure_sqlite(engine: AsyncEngine) -> None:
    # pysqlite defers BEGIN until the first write, which lets two transfers read
    # the same balance. Write units take the lock up front instead; readers use
    # a plain BEGIN and, under WAL, never wait on a writer.
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        if conn.get_execution_options().get(WRITER_OPTION):
            conn.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            conn.exec_driver_sql("BEGIN")


async def claim_writer(session: AsyncSession) -> None:
    """
    Bind the session's open transaction to a writer connection.

    Must be awaited right after session.begin(), before any statement. On
    SQLite the transaction then starts with BEGIN IMMEDIATE; other backends
    ignore the option and rely on row locks.
    """
    await session.connection(execution_options={WRITER_OPTION: True})


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for DATABASE_URL.
    """
    url = make_url(database_url)
    engine = create_async_engine(url, echo=echo, future=True)
    if url.get_backend_name() == "sqlite":
        _configure_sqlite(engine)
    return engine


def build_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


async def create_schema(engine: AsyncEngine) -> None:
    """
    Create missing tables (no migrations; the schema is small and additive).
    """
    # models must be imported so their tables are registered on Base.metadata
    from points_bank.db import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
