"""
Shop Service Health Check Utilities
===================================

Health checks for the Shop service: process liveness plus a database probe
that also reports how many orders are stored.
"""

import time
from typing import Any, Awaitable, Callable, Dict

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.order import Order

_START_TIME = time.time()

HealthCheck = Callable[[], Awaitable[Dict[str, Any]]]


class ShopServiceHealthChecker:
    """Runs named async checks and aggregates them into one report"""

    def __init__(self, service_name: str = "shop_service") -> None:
        self.service_name = service_name
        self.checks: Dict[str, HealthCheck] = {}

    def add_check(self, name: str, check_func: HealthCheck) -> None:
        self.checks[name] = check_func

    async def run_checks(self) -> Dict[str, Any]:
        """Run every check; a raising check is reported as ``error``"""
        results: Dict[str, Dict[str, Any]] = {}
        started = time.perf_counter()

        for name, check_func in self.checks.items():
            check_started = time.perf_counter()
            try:
                result = await check_func()
            except Exception as e:
                result = {"status": "error", "error": str(e)}
            result["duration_ms"] = round(
                (time.perf_counter() - check_started) * 1000, 2
            )
            results[name] = result

        healthy = all(r.get("status") == "healthy" for r in results.values())
        return {
            "service": self.service_name,
            "status": "healthy" if healthy else "unhealthy",
            "checks": results,
            "total_duration_ms": round((time.perf_counter() - started) * 1000, 2),
            "uptime_seconds": round(time.time() - _START_TIME, 2),
            "timestamp": time.time(),
        }

    def add_basic_check(self, version: str) -> None:
        async def basic_check() -> Dict[str, Any]:
            return {
                "status": "healthy",
                "message": "Shop Service is running",
                "version": version,
            }

        self.add_check("basic", basic_check)

    def add_database_check(self, session: AsyncSession) -> None:
        async def database_check() -> Dict[str, Any]:
            await session.execute(text("SELECT 1"))
            order_count = await session.scalar(select(func.count(Order.id)))
            return {"status": "healthy", "orders": order_count or 0}

        self.add_check("database", database_check)


async def create_shop_service_health_check(
    session: AsyncSession,
    service_name: str = "shop_service",
    version: str = "1.0.0",
) -> Dict[str, Any]:
    """Build the health report served by ``GET /health``"""
    health_checker = ShopServiceHealthChecker(service_name)
    health_checker.add_basic_check(version)
    health_checker.add_database_check(session)
    return await health_checker.run_checks()
