"""Tests for the router error-mapping decorator."""

import pytest
from fastapi import HTTPException

from workbench.api.routers.router_utils import handle_service_errors
from workbench.core.exceptions import (
    AuthenticationError,
    ReminderNotFoundError,
    TextGenerationError,
    UsernameTakenError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error,status_code",
    [
        (ReminderNotFoundError("r-1"), 404),
        (ValidationError("bad", field="name"), 400),
        (AuthenticationError("nope"), 401),
        (UsernameTakenError("ada"), 409),
        (TextGenerationError("down"), 502),
        (RuntimeError("boom"), 500),
    ],
)
async def test_maps_exceptions_to_status_codes(error, status_code) -> None:
    @handle_service_errors
    async def endpoint():
        raise error

    with pytest.raises(HTTPException) as exc_info:
        await endpoint()

    assert exc_info.value.status_code == status_code


async def test_http_exceptions_pass_through() -> None:
    @handle_service_errors
    async def endpoint():
        raise HTTPException(status_code=418, detail="teapot")

    with pytest.raises(HTTPException) as exc_info:
        await endpoint()

    assert exc_info.value.status_code == 418


async def test_success_returns_value() -> None:
    @handle_service_errors
    async def endpoint(value):
        return value * 2

    assert await endpoint(21) == 42
