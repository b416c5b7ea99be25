"""
Unit tests for Shop Service Error Handling Middleware
Tests exception handling and error response bodies.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shop_service.app.core.exceptions import IllegalStateError, NotEnoughStockError
from shop_service.app.middleware.error.error_handler import (
    ShopServiceErrorHandler,
    setup_shop_error_handling,
)


class TestShopServiceErrorHandler:
    """Test cases for error handling middleware"""

    @pytest.fixture
    def app(self):
        """Create FastAPI app instance with handlers installed"""
        app = FastAPI()
        ShopServiceErrorHandler.setup_error_handlers(app)
        return app

    @pytest.fixture
    def mock_request(self):
        """Create mock request"""
        request = MagicMock(spec=Request)
        request.url.path = "/api/v2/members"
        request.method = "POST"
        request.headers = {"X-Correlation-ID": "test-correlation-id"}
        request.state = MagicMock()
        return request

    def test_setup_shop_error_handling_registers_handlers(self):
        app = FastAPI()
        initial_handlers = len(app.exception_handlers)

        setup_shop_error_handling(app)

        assert len(app.exception_handlers) > initial_handlers
        assert IllegalStateError in app.exception_handlers
        assert NotEnoughStockError in app.exception_handlers

    @pytest.mark.asyncio
    async def test_http_exception_handler(self, app, mock_request):
        handler = app.exception_handlers[StarletteHTTPException]

        response = await handler(
            mock_request, StarletteHTTPException(status_code=404, detail="Not found")
        )

        assert response.status_code == 404
        body = json.loads(response.body.decode())
        assert body["error"]["type"] == "http_error"
        assert body["error"]["message"] == "Not found"
        assert body["error"]["correlation_id"] == "test-correlation-id"
        assert body["error"]["path"] == "/api/v2/members"
        assert body["error"]["method"] == "POST"
        assert "timestamp" in body["error"]

    @pytest.mark.asyncio
    async def test_illegal_state_maps_to_conflict(self, app, mock_request):
        handler = app.exception_handlers[IllegalStateError]

        response = await handler(
            mock_request, IllegalStateError("Member already exists.")
        )

        assert response.status_code == 409
        body = json.loads(response.body.decode())
        assert body["error"]["type"] == "illegal_state"
        assert body["error"]["message"] == "Member already exists."

    @pytest.mark.asyncio
    async def test_not_enough_stock_maps_to_bad_request(self, app, mock_request):
        handler = app.exception_handlers[NotEnoughStockError]

        response = await handler(mock_request, NotEnoughStockError("need more stock"))

        assert response.status_code == 400
        body = json.loads(response.body.decode())
        assert body["error"]["type"] == "not_enough_stock"
        assert body["error"]["message"] == "need more stock"

    @pytest.mark.asyncio
    async def test_request_validation_error_handler(self, app, mock_request):
        handler = app.exception_handlers[RequestValidationError]
        exc = RequestValidationError(
            errors=[
                {
                    "loc": ("body", "name"),
                    "msg": "String should have at least 1 character",
                    "type": "string_too_short",
                }
            ]
        )

        response = await handler(mock_request, exc)

        assert response.status_code == 422
        body = json.loads(response.body.decode())
        assert body["error"]["type"] == "validation_error"
        errors = body["error"]["details"]["validation_errors"]
        assert errors == [
            {
                "field": "body.name",
                "message": "String should have at least 1 character",
                "type": "string_too_short",
            }
        ]

    @pytest.mark.asyncio
    async def test_general_exception_handler(self, app, mock_request):
        handler = app.exception_handlers[Exception]

        response = await handler(mock_request, RuntimeError("boom"))

        assert response.status_code == 500
        body = json.loads(response.body.decode())
        assert body["error"]["type"] == "internal_server_error"
        assert body["error"]["details"] == {"exception_type": "RuntimeError"}
