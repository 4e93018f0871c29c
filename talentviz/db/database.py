from typing import AsyncIterator
from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from talentviz.core.config import settings
from talentviz.repositories.StorageInterface import IStorage
from talentviz.repositories.db_storage import DatabaseStorage

engine = create_async_engine(settings.DATABASE_URL, echo=False, future=True, pool_pre_ping=True)
AsyncSessionLocal = sessionmaker(
    bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Dependencies for FastAPI routes


async def get_storage(request: Request) -> AsyncIterator[IStorage]:
    """Storage for one request: the app's in-memory store when one is installed,
    otherwise a DatabaseStorage on a fresh session."""
    memory_storage = getattr(request.app.state, "memory_storage", None)
    if memory_storage is not None:
        yield memory_storage
        return
    async with AsyncSessionLocal() as session:
        yield DatabaseStorage(session)
