"""Database connection and session management."""
import logging

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config.settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def configure_sqlite_engine(engine: AsyncEngine) -> None:
    """Make SQLite honour foreign keys and SAVEPOINTs.

    pysqlite/aiosqlite defer BEGIN on their own, which breaks nested
    transactions; SQLAlchemy then emits BEGIN itself.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def create_primary_engine(url: str | None = None) -> AsyncEngine:
    """Create the database engine used for generation and reads."""
    url = url or settings.database_url
    if url.startswith("sqlite"):
        new_engine = create_async_engine(url, echo=settings.database_echo, future=True)
        configure_sqlite_engine(new_engine)
        return new_engine

    return create_async_engine(
        url,
        echo=settings.database_echo,
        future=True,
        pool_size=10,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=300,
        pool_pre_ping=True,
    )


engine = create_primary_engine()

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


async def get_db() -> AsyncSession:
    """Dependency that provides a database session."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def check_database_health() -> bool:
    """Run a trivial query against the primary database."""
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar() == 1
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        return False


async def init_db():
    """Create tables that do not exist yet."""
    # Register models on Base.metadata
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def close_all_engines():
    """Dispose the engine's connection pool."""
    await engine.dispose()
