"""Unit tests for the route helpers."""

import pytest
from fastapi import HTTPException

from chat.config import AuthSettings
from chat.domain.error import (
    ContentDeletedError,
    NotFoundError,
    OperationFailedError,
    ValidationError,
)
from chat.domain.service import JWTService
from chat.interface.api.routes.common import require_user, to_http_error


@pytest.fixture
def jwt_service():
    return JWTService(auth_settings=AuthSettings(jwt_secret="test-secret"))


class TestRequireUser:
    """Tests for bearer authentication."""

    def test_valid_bearer_token(self, jwt_service):
        token = jwt_service.create_token("user-1")

        assert require_user(f"Bearer {token}", jwt_service) == "user-1"

    @pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer nonsense"])
    def test_rejects_missing_or_bad_header(self, jwt_service, header):
        with pytest.raises(HTTPException) as exc_info:
            require_user(header, jwt_service)

        assert exc_info.value.status_code == 401


class TestToHttpError:
    """Tests for domain error mapping."""

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (ValidationError("text is required"), 400),
            (NotFoundError("Message", "abc"), 404),
            (ContentDeletedError("message", "abc"), 409),
            (OperationFailedError("like", 3), 503),
        ],
    )
    def test_status_codes(self, error, status_code):
        http_error = to_http_error(error)

        assert http_error.status_code == status_code
        assert http_error.detail == str(error)
