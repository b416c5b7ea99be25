"""
FastAPI dependency injection for Shop Service

Provides database sessions, services and correlation ID handling to the
API routers.
"""

from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db_session
from ..core.settings import get_settings
from ..services.item_service import ItemService
from ..services.member_service import MemberService
from ..services.order_query_service import OrderQueryService
from ..services.order_service import OrderService

# =====================================================
# DATABASE DEPENDENCIES
# =====================================================


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide async database session"""
    async for session in get_db_session():
        yield session


# =====================================================
# SERVICE DEPENDENCIES
# =====================================================


def get_member_service(
    session: AsyncSession = Depends(get_async_session),
) -> MemberService:
    """Provide MemberService instance"""
    return MemberService(session)


def get_item_service(
    session: AsyncSession = Depends(get_async_session),
) -> ItemService:
    """Provide ItemService instance"""
    return ItemService(session)


def get_order_service(
    session: AsyncSession = Depends(get_async_session),
) -> OrderService:
    """Provide OrderService instance"""
    return OrderService(session, search_limit=get_settings().ORDER_SEARCH_LIMIT)


def get_order_query_service(
    session: AsyncSession = Depends(get_async_session),
) -> OrderQueryService:
    """Provide OrderQueryService instance"""
    return OrderQueryService(session, search_limit=get_settings().ORDER_SEARCH_LIMIT)


# =====================================================
# REQUEST CONTEXT DEPENDENCIES
# =====================================================


def get_correlation_id(request: Request) -> Optional[str]:
    """Extract correlation ID from request headers or state"""
    correlation_id = request.headers.get("X-Correlation-ID") or request.headers.get(
        "x-request-id"
    )

    # Fallback to request state
    if not correlation_id:
        correlation_id = getattr(request.state, "correlation_id", None)

    return correlation_id


# =====================================================
# COMMON DEPENDENCY ALIASES
# =====================================================

CorrelationIdDep = Depends(get_correlation_id)
DatabaseDep = Depends(get_async_session)

MemberServiceDep = Depends(get_member_service)
ItemServiceDep = Depends(get_item_service)
OrderServiceDep = Depends(get_order_service)
OrderQueryServiceDep = Depends(get_order_query_service)
