from typing import Any, Dict

from fastapi import APIRouter
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.settings import get_settings
from ...utils.service_health import create_shop_service_health_check
from ..dependencies import DatabaseDep

router = APIRouter()


@router.get("/health")
async def health_check(session: AsyncSession = DatabaseDep) -> Dict[str, Any]:
    """Health check endpoint for the shop service"""
    settings = get_settings()
    return await create_shop_service_health_check(
        session, service_name=settings.SERVICE_NAME, version=settings.APP_VERSION
    )
