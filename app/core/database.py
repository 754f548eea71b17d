"""Async database engine, session factory and declarative base."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import settings


def _engine_options(url: str) -> dict:
    """Bound every store call: pool checkout and statement execution."""
    options: dict = {"echo": settings.DB_ECHO}
    if url.startswith("sqlite"):
        # SQLite uses a static/singleton pool without checkout timeouts
        return options
    options.update(
        pool_pre_ping=True,
        pool_timeout=settings.DB_POOL_TIMEOUT_SECONDS,
    )
    if "+asyncpg" in url:
        options["connect_args"] = {"command_timeout": settings.DB_COMMAND_TIMEOUT_SECONDS}
    return options


engine = create_async_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


async def get_db():
    """Yield one session per request."""
    async with async_session() as session:
        yield session
