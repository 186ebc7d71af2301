"""Unit tests for CloudflareWorkersSecretsAPI.

Tests cover:
- create(): credential validation
- set_workers_secret: URL, auth headers, JSON body, response parsing
- delete_workers_secret: URL and success
- Error mapping: 401/403, 404, 429, 5xx, success=false envelope, invalid JSON
- Connection errors (timeout, DNS failure)

Architecture:
- Uses pytest-httpx for HTTP mocking
- Tests Result pattern (Success/Failure)
- Tests specific error types (ProviderAuthenticationError, etc.)
"""

import json
from dataclasses import replace

import httpx
import pytest
from pytest_httpx import HTTPXMock

from secretport.core.enums import ErrorCode
from secretport.core.result import Failure, Success
from secretport.domain.errors import (
    ProviderAuthenticationError,
    ProviderInvalidResponseError,
    ProviderNotFoundError,
    ProviderRateLimitError,
    ProviderUnavailableError,
    SecretsValidationError,
)
from secretport.infrastructure.secrets.cloudflare import (
    CloudflareWorkersSecretsAPI,
    WorkersPutSecretRequest,
    WorkersPutSecretResponse,
)
from tests.conftest import TEST_ACCOUNT_ID, TEST_API_BASE_URL

SECRETS_URL = f"{TEST_API_BASE_URL}/accounts/{TEST_ACCOUNT_ID}/workers/scripts/my-worker/secrets"


def _envelope(result=None, *, success=True, errors=None) -> dict:
    return {
        "success": success,
        "errors": errors or [],
        "messages": [],
        "result": result,
    }


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def api(credentials) -> CloudflareWorkersSecretsAPI:
    """Create API client against the test API root."""
    result = CloudflareWorkersSecretsAPI.create(credentials)
    assert isinstance(result, Success)
    return result.value


@pytest.fixture
def put_request() -> WorkersPutSecretRequest:
    return WorkersPutSecretRequest(name="API_KEY", text="s3cr3t")


# =============================================================================
# Test: create
# =============================================================================


@pytest.mark.unit
class TestCreate:
    """Test client construction."""

    @pytest.mark.parametrize(
        ("attr", "env_name"),
        [
            ("api_key", "CLOUDFLARE_API_KEY"),
            ("api_email", "CLOUDFLARE_API_EMAIL"),
            ("account_id", "CLOUDFLARE_ACCOUNT_ID"),
        ],
    )
    def test_empty_credential_fails(self, credentials, attr, env_name):
        """Each missing credential is reported by its environment name."""
        result = CloudflareWorkersSecretsAPI.create(replace(credentials, **{attr: ""}))

        assert isinstance(result, Failure)
        assert isinstance(result.error, SecretsValidationError)
        assert result.error.code == ErrorCode.PROVIDER_CREDENTIAL_INVALID
        assert result.error.field == attr
        assert env_name in result.error.message

    def test_all_missing_lists_every_credential(self, credentials):
        result = CloudflareWorkersSecretsAPI.create(
            replace(credentials, api_key="", api_email="", account_id="")
        )

        assert isinstance(result, Failure)
        assert result.error.message == (
            "invalid credentials: CLOUDFLARE_API_KEY, CLOUDFLARE_API_EMAIL, "
            "CLOUDFLARE_ACCOUNT_ID must not be empty"
        )

    def test_credentials_repr_hides_api_key(self, credentials):
        assert "test-api-key" not in repr(credentials)


# =============================================================================
# Test: set_workers_secret
# =============================================================================


@pytest.mark.unit
class TestSetWorkersSecret:
    """Test set_workers_secret success scenarios."""

    def test_sends_put_with_body_and_auth_headers(
        self, api, put_request, httpx_mock: HTTPXMock
    ):
        """PUT carries name/text/type and X-Auth-* headers."""
        httpx_mock.add_response(
            method="PUT",
            url=SECRETS_URL,
            json=_envelope({"name": "API_KEY", "type": "secret_text"}),
        )

        result = api.set_workers_secret("my-worker", put_request)

        assert isinstance(result, Success)
        assert result.value == WorkersPutSecretResponse(name="API_KEY", type="secret_text")

        request = httpx_mock.get_request()
        assert request.headers["X-Auth-Key"] == "test-api-key"
        assert request.headers["X-Auth-Email"] == "owner@example.com"
        assert json.loads(request.content) == {
            "name": "API_KEY",
            "text": "s3cr3t",
            "type": "secret_text",
        }

    def test_script_name_is_url_escaped(self, api, put_request, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="PUT",
            url=f"{TEST_API_BASE_URL}/accounts/{TEST_ACCOUNT_ID}/workers/scripts/my%20worker/secrets",
            json=_envelope({"name": "API_KEY", "type": "secret_text"}),
        )

        result = api.set_workers_secret("my worker", put_request)

        assert isinstance(result, Success)

    def test_request_repr_hides_value(self, put_request):
        assert "s3cr3t" not in repr(put_request)


# =============================================================================
# Test: delete_workers_secret
# =============================================================================


@pytest.mark.unit
class TestDeleteWorkersSecret:
    """Test delete_workers_secret."""

    def test_sends_delete_to_secret_url(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="DELETE",
            url=f"{SECRETS_URL}/API_KEY",
            json=_envelope(None),
        )

        result = api.delete_workers_secret("my-worker", "API_KEY")

        assert result == Success(value=None)

    def test_missing_secret_returns_not_found(self, api, httpx_mock: HTTPXMock):
        """Backend 404 is reported, not turned into success."""
        httpx_mock.add_response(
            method="DELETE",
            url=f"{SECRETS_URL}/NOPE",
            status_code=404,
            json=_envelope(
                success=False,
                errors=[{"code": 10056, "message": "secret not found"}],
            ),
        )

        result = api.delete_workers_secret("my-worker", "NOPE")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderNotFoundError)
        assert result.error.status_code == 404
        assert result.error.details == {
            "errors": [{"code": 10056, "message": "secret not found"}]
        }


# =============================================================================
# Test: error mapping
# =============================================================================


@pytest.mark.unit
class TestErrorMapping:
    """Test HTTP status and envelope error mapping."""

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_auth_errors(self, api, put_request, httpx_mock: HTTPXMock, status_code):
        httpx_mock.add_response(
            method="PUT",
            url=SECRETS_URL,
            status_code=status_code,
            json=_envelope(success=False, errors=[{"code": 10000, "message": "Authentication error"}]),
        )

        result = api.set_workers_secret("my-worker", put_request)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderAuthenticationError)
        assert result.error.code == ErrorCode.PROVIDER_AUTHENTICATION_FAILED
        assert result.error.status_code == status_code

    def test_rate_limited_with_retry_after(
        self, api, put_request, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(
            method="PUT",
            url=SECRETS_URL,
            status_code=429,
            headers={"Retry-After": "30"},
            text="slow down",
        )

        result = api.set_workers_secret("my-worker", put_request)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderRateLimitError)
        assert result.error.retry_after == 30
        assert result.error.details == {"response_body": "slow down"}

    def test_server_error_is_transient(self, api, put_request, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="PUT", url=SECRETS_URL, status_code=502)

        result = api.set_workers_secret("my-worker", put_request)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderUnavailableError)
        assert result.error.is_transient is True
        assert result.error.status_code == 502

    def test_unexpected_client_error(self, api, put_request, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="PUT",
            url=SECRETS_URL,
            status_code=400,
            json=_envelope(success=False, errors=[{"code": 10021, "message": "bad name"}]),
        )

        result = api.set_workers_secret("my-worker", put_request)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderInvalidResponseError)
        assert result.error.code == ErrorCode.PROVIDER_INVALID_RESPONSE
        assert result.error.details == {"errors": [{"code": 10021, "message": "bad name"}]}

    def test_unsuccessful_envelope_with_200(
        self, api, put_request, httpx_mock: HTTPXMock
    ):
        """success=false is an error even when the status is 200."""
        httpx_mock.add_response(
            method="PUT",
            url=SECRETS_URL,
            json=_envelope(success=False, errors=[{"code": 7003, "message": "no such script"}]),
        )

        result = api.set_workers_secret("my-worker", put_request)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderInvalidResponseError)
        assert result.error.message == "Cloudflare API error: no such script"

    def test_invalid_json(self, api, put_request, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="PUT", url=SECRETS_URL, text="<html>oops</html>")

        result = api.set_workers_secret("my-worker", put_request)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderInvalidResponseError)
        assert result.error.response_body == "<html>oops</html>"

    def test_non_object_json(self, api, put_request, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="PUT", url=SECRETS_URL, json=["not", "an", "object"])

        result = api.set_workers_secret("my-worker", put_request)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderInvalidResponseError)


# =============================================================================
# Test: connection errors
# =============================================================================


@pytest.mark.unit
class TestConnectionErrors:
    """Test transport failures."""

    def test_timeout(self, api, put_request, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        result = api.set_workers_secret("my-worker", put_request)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderUnavailableError)
        assert "timed out" in result.error.message

    def test_connection_error(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ConnectError("Name or service not known"))

        result = api.delete_workers_secret("my-worker", "API_KEY")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderUnavailableError)
        assert result.error.code == ErrorCode.PROVIDER_UNAVAILABLE
