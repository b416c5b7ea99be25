"""Database configuration for Shop Service"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from ..models import ShopServiceBase
from ..utils.logging import setup_shop_logging as setup_logging
from .settings import get_settings

logger = setup_logging("shop_service.database", log_level=get_settings().LOG_LEVEL)


class ShopServiceDatabaseManager:
    """Custom database manager for Shop Service with optimized settings."""

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 40,
    ) -> None:
        engine_kwargs: Dict[str, Any] = {
            "echo": echo,
            "future": True,
        }

        if "sqlite" in database_url:
            # SQLite configuration for development and tests
            engine_kwargs["connect_args"] = {
                "timeout": 60,
                "check_same_thread": False,
            }
            database_type = "sqlite"
        else:
            # PostgreSQL configuration
            engine_kwargs.update(
                {
                    "pool_size": pool_size,
                    "max_overflow": max_overflow,
                    "pool_timeout": 45,
                    "pool_recycle": 3600,  # 1 hour recycle
                    "pool_pre_ping": True,
                    "pool_reset_on_return": "commit",
                    "connect_args": {
                        "command_timeout": 30,
                        "server_settings": {"jit": "off"},
                    },
                }
            )
            database_type = "postgresql"

        self.async_engine = create_async_engine(database_url, **engine_kwargs)
        self.async_session_maker = async_sessionmaker(
            bind=self.async_engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
            autocommit=False,
        )

        logger.info(
            "Shop Service database manager initialized",
            extra={
                "operation": "database_manager_init",
                "database_type": database_type,
                "echo": echo,
            },
        )

    async def create_tables(self) -> None:
        """Create all Shop Service database tables."""
        async with self.async_engine.begin() as conn:
            await conn.run_sync(ShopServiceBase.metadata.create_all, checkfirst=True)
        logger.info(
            "Database tables created successfully",
            extra={"operation": "create_tables"},
        )

    async def get_async_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get async database session for Shop Service."""
        async with self.async_session_maker() as session:
            yield session

    async def close(self) -> None:
        """Properly close the Shop Service database engine and connections."""
        await self.async_engine.dispose()
        logger.info(
            "Shop Service database connections closed",
            extra={"operation": "database_close"},
        )


# Initialize Shop Service database manager
settings = get_settings()
database_manager = ShopServiceDatabaseManager(
    database_url=settings.SHOP_DATABASE_URL,
    echo=settings.DEBUG,
    pool_size=settings.DATABASE_POOL_SIZE,
    max_overflow=settings.DATABASE_MAX_OVERFLOW,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Database session dependency for FastAPI using Shop Service database manager"""
    async for session in database_manager.get_async_session():
        yield session
