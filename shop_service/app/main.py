import time
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.health import router as health_router
from .api.v1.items import router as items_router
from .api.v1.members import router as members_router
from .api.v1.order_queries import router as order_queries_router
from .api.v1.orders import router as orders_router
from .core import database
from .core.sample_data import init_sample_data
from .core.settings import get_settings
from .middleware.error import setup_shop_error_handling
from .utils.logging import setup_shop_logging as setup_logging

settings = get_settings()

logger = setup_logging(
    "shop_service",
    log_level=settings.LOG_LEVEL,
    enable_file_logging=settings.ENABLE_FILE_LOGGING,
)


# Lifespan context manager for startup and shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    startup_start = time.time()
    database_manager = database.database_manager

    try:
        logger.info(
            "Starting shop service initialization",
            extra={
                "environment": settings.ENVIRONMENT,
                "debug_mode": settings.DEBUG,
                "service_version": settings.APP_VERSION,
            },
        )

        db_start = time.time()
        await database_manager.create_tables()
        db_duration = int((time.time() - db_start) * 1000)
        logger.info(
            "Database initialization completed", extra={"duration_ms": db_duration}
        )

        if settings.SEED_SAMPLE_DATA:
            async with database_manager.async_session_maker() as session:
                await init_sample_data(session)

        logger.info(
            "Shop service started successfully",
            extra={
                "total_startup_duration_ms": int((time.time() - startup_start) * 1000)
            },
        )

    except Exception as e:
        logger.error(
            "Failed to start shop service",
            exc_info=True,
            extra={
                "startup_duration_ms": int((time.time() - startup_start) * 1000),
                "error_type": type(e).__name__,
            },
        )
        raise

    yield

    logger.info("Starting shop service shutdown")
    await database_manager.close()
    logger.info("Shop service shutdown completed")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
    )

    # Error handling (after middleware)
    setup_shop_error_handling(app)

    routers_info: list[dict[str, Any]] = []

    app.include_router(health_router, tags=["Health"])
    routers_info.append({"router": "health", "tags": ["Health"]})

    app.include_router(members_router, tags=["Members"])
    routers_info.append({"router": "members", "tags": ["Members"]})

    app.include_router(items_router, tags=["Items"])
    routers_info.append({"router": "items", "tags": ["Items"]})

    app.include_router(orders_router, tags=["Orders"])
    routers_info.append({"router": "orders", "tags": ["Orders"]})

    app.include_router(order_queries_router, tags=["Order Queries"])
    routers_info.append({"router": "order_queries", "tags": ["Order Queries"]})

    logger.info(
        "API routes configured",
        extra={"total_routers": len(routers_info), "routers": routers_info},
    )

    return app


app = create_app()
