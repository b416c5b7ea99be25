import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...core.exceptions import IllegalStateError, NotEnoughStockError
from ...utils.logging import setup_shop_logging

logger = setup_shop_logging("shop_service.error_handler")


def _validation_details(errors: Any) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


class ShopServiceErrorHandler:
    """Class to setup error handling middleware for the Shop Service."""

    @staticmethod
    def setup_error_handlers(app: FastAPI) -> None:
        """Setup error handlers for the FastAPI application."""

        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(  # type: ignore
            request: Request, exc: StarletteHTTPException
        ) -> JSONResponse:
            """Handle HTTP exceptions."""

            return ShopServiceErrorHandler._create_error_response(
                request=request,
                status_code=exc.status_code,
                error_type="http_error",
                message=str(exc.detail),
                details={"path": request.url.path, "method": request.method},
            )

        @app.exception_handler(RequestValidationError)
        async def validation_exception_handler(  # type: ignore
            request: Request, exc: RequestValidationError
        ) -> JSONResponse:
            """Handle request validation errors."""

            return ShopServiceErrorHandler._create_error_response(
                request=request,
                status_code=422,
                error_type="validation_error",
                message="Request validation failed",
                details={"validation_errors": _validation_details(exc.errors())},
            )

        @app.exception_handler(ValidationError)
        async def pydantic_validation_exception_handler(  # type: ignore
            request: Request, exc: ValidationError
        ) -> JSONResponse:
            """Handle Pydantic validation errors."""

            return ShopServiceErrorHandler._create_error_response(
                request=request,
                status_code=400,
                error_type="data_validation_error",
                message="Data validation failed",
                details={"validation_errors": _validation_details(exc.errors())},
            )

        @app.exception_handler(IllegalStateError)
        async def illegal_state_error_handler(  # type: ignore
            request: Request, exc: IllegalStateError
        ) -> JSONResponse:
            """Handle operations rejected by the current entity state."""

            return ShopServiceErrorHandler._create_error_response(
                request=request,
                status_code=409,
                error_type="illegal_state",
                message=str(exc),
                details={"exception_type": "IllegalStateError"},
            )

        @app.exception_handler(NotEnoughStockError)
        async def not_enough_stock_error_handler(  # type: ignore
            request: Request, exc: NotEnoughStockError
        ) -> JSONResponse:
            """Handle orders exceeding the available stock."""

            return ShopServiceErrorHandler._create_error_response(
                request=request,
                status_code=400,
                error_type="not_enough_stock",
                message=str(exc),
                details={"exception_type": "NotEnoughStockError"},
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(  # type: ignore
            request: Request, exc: Exception
        ) -> JSONResponse:
            """Handle all uncaught exceptions."""

            logger.error(
                "Unhandled exception occurred",
                extra={
                    "correlation_id": getattr(
                        request.state, "correlation_id", "unknown"
                    ),
                    "path": request.url.path,
                    "method": request.method,
                    "exception_type": type(exc).__name__,
                    "exception_message": str(exc),
                    "traceback": traceback.format_exc(),
                    "event_type": "unhandled_exception",
                },
                exc_info=True,
            )

            return ShopServiceErrorHandler._create_error_response(
                request=request,
                status_code=500,
                error_type="internal_server_error",
                message="An internal server error occurred",
                details={"exception_type": type(exc).__name__},
            )

    @staticmethod
    def _create_error_response(
        request: Request,
        status_code: int,
        error_type: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""

        correlation_id = request.headers.get("X-Correlation-ID") or getattr(
            request.state, "correlation_id", "unknown"
        )

        error_response: Dict[str, Any] = {
            "error": {
                "type": error_type,
                "message": message,
                "correlation_id": correlation_id,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "path": request.url.path,
                "method": request.method,
            }
        }

        if details:
            error_response["error"]["details"] = details

        if status_code < 500:
            logger.warning(
                f"Client error: {error_type}",
                extra={
                    "correlation_id": correlation_id,
                    "status_code": status_code,
                    "error_type": error_type,
                    "path": request.url.path,
                    "method": request.method,
                    "event_type": "client_error",
                },
            )

        return JSONResponse(status_code=status_code, content=error_response)


def setup_shop_error_handling(app: FastAPI) -> None:
    """Setup error handling middleware for the Shop Service."""

    ShopServiceErrorHandler.setup_error_handlers(app)

    logger.info(
        "Shop Service error handling configured",
        extra={"event_type": "error_handler_setup"},
    )
