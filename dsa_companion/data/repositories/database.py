from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from dsa_companion.config import Config, logger

# Imported so their tables are registered on SQLModel.metadata
from dsa_companion.data.schemas import Problem, User  # noqa: F401

db_logger = logger.getChild("db")

async_engine = create_async_engine(url=Config.DATABASE_URL)


async def init_db() -> None:
    """
    Creates the database file's directory and any missing tables.
    """
    db_path = Config.SQLITE_PATH
    if db_path is not None:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        db_logger.info(f"Using SQLite database at {db_path.resolve()}")

    async with async_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get an async session for the application database.
    """
    async_session = async_sessionmaker(
        bind=async_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as session:
        yield session
