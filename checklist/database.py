from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlmodel import SQLModel

from checklist.config import get_settings
from checklist.models import StorageSlot  # noqa: F401  (registers table metadata)

settings = get_settings()

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    future=True,
    pool_pre_ping=True,  # Verify connection health before use
)

# Session factory
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db() -> None:
    """Create the key/value slot table if needed."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
