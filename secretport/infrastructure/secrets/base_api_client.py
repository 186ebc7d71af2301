"""Base API client for secrets backend HTTP communication.

This module provides a base class for backend API clients that handles:
- HTTP request execution with timeout/connection error handling
- Response status code interpretation
- JSON parsing with error handling
- Structured logging with provider context

Subclasses only need to:
1. Build authentication headers
2. Call the base methods for HTTP operations

Architecture:
    - Infrastructure layer (adapter for external APIs)
    - Uses a long-lived synchronous httpx.Client; calls block the caller
    - Returns Result types (no exceptions for backend errors)
    - Never retries: one call, one request
"""

from typing import Any

import httpx
import structlog

from secretport.core.constants import PROVIDER_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from secretport.core.enums import ErrorCode
from secretport.core.result import Failure, Result, Success
from secretport.domain.errors import (
    ProviderAuthenticationError,
    ProviderError,
    ProviderInvalidResponseError,
    ProviderNotFoundError,
    ProviderRateLimitError,
    ProviderUnavailableError,
)


class BaseSecretsAPIClient:
    """Base class for secrets backend API clients with shared HTTP handling.

    Attributes:
        _base_url: Backend API base URL (without trailing slash).
        _provider_name: Provider identifier for logging and error messages.
        _timeout: HTTP request timeout in seconds.
        _client: Underlying httpx.Client (owned unless injected).
        _logger: Structured logger with provider context.

    Example:
        >>> class WorkersAPI(BaseSecretsAPIClient):
        ...     def delete_secret(self, script: str, name: str):
        ...         return self._execute_and_parse_object(
        ...             method="DELETE",
        ...             path=f"/scripts/{script}/secrets/{name}",
        ...             headers=self._auth_headers(),
        ...             operation="delete_secret",
        ...         )
    """

    def __init__(
        self,
        *,
        base_url: str,
        provider_name: str,
        timeout: float = PROVIDER_TIMEOUT_DEFAULT,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize base API client.

        Args:
            base_url: Backend API base URL.
            provider_name: Provider identifier (e.g., "cloudflare_workers_secret").
            timeout: HTTP request timeout in seconds.
            http_client: Optional pre-built client (connection pooling, proxies).
        """
        self._base_url = base_url.rstrip("/")
        self._provider_name = provider_name
        self._timeout = timeout
        self._client = http_client or httpx.Client(timeout=timeout)
        self._logger = structlog.get_logger(f"{provider_name}_api")

    def close(self) -> None:
        """Release pooled connections."""
        self._client.close()

    def _execute_request(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, ProviderError]:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method (GET, PUT, DELETE, ...).
            path: URL path relative to base_url.
            headers: HTTP headers including authentication.
            json_data: Optional JSON body.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw HTTP response on success.
            Failure(ProviderUnavailableError): On timeout or connection error.
        """
        url = f"{self._base_url}{path}"

        try:
            response = self._client.request(
                method=method,
                url=url,
                headers=headers,
                json=json_data,
                timeout=self._timeout,
            )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                "backend_api_timeout",
                provider=self._provider_name,
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"{self._provider_name} API request timed out",
                    provider_name=self._provider_name,
                    is_transient=True,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                "backend_api_connection_error",
                provider=self._provider_name,
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"Failed to connect to {self._provider_name} API: {e}",
                    provider_name=self._provider_name,
                    is_transient=True,
                )
            )

    def _error_details(self, response: httpx.Response) -> dict[str, Any]:
        """Extract debugging context from an error response.

        Subclasses override this to surface the backend's own error list.
        """
        return {"response_body": response.text[:RESPONSE_BODY_MAX_LENGTH]}

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[ProviderError] | None:
        """Check HTTP response for errors and return appropriate ProviderError.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure(ProviderError) if error detected, None if response is OK.
        """
        status = response.status_code

        if response.is_success:
            return None

        self._logger.warning(
            "backend_api_error_status",
            provider=self._provider_name,
            operation=operation,
            status_code=status,
        )
        details = self._error_details(response)

        # Rate limiting (429)
        if status == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = int(retry_after) if retry_after and retry_after.isdigit() else None
            return Failure(
                error=ProviderRateLimitError(
                    code=ErrorCode.PROVIDER_RATE_LIMITED,
                    message=f"{self._provider_name} API rate limit exceeded",
                    provider_name=self._provider_name,
                    status_code=status,
                    retry_after=retry_seconds,
                    details=details,
                )
            )

        if status in (401, 403):
            return Failure(
                error=ProviderAuthenticationError(
                    code=ErrorCode.PROVIDER_AUTHENTICATION_FAILED,
                    message=f"{self._provider_name} API rejected the credentials",
                    provider_name=self._provider_name,
                    status_code=status,
                    details=details,
                )
            )

        if status == 404:
            return Failure(
                error=ProviderNotFoundError(
                    code=ErrorCode.PROVIDER_RESOURCE_NOT_FOUND,
                    message=f"{self._provider_name} resource not found",
                    provider_name=self._provider_name,
                    status_code=status,
                    details=details,
                )
            )

        if status >= 500:
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"{self._provider_name} API server error: {status}",
                    provider_name=self._provider_name,
                    status_code=status,
                    is_transient=True,
                    details=details,
                )
            )

        return Failure(
            error=ProviderInvalidResponseError(
                code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                message=f"Unexpected response from {self._provider_name}: {status}",
                provider_name=self._provider_name,
                status_code=status,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                details=details,
            )
        )

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Parse response as JSON object with error handling.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(ProviderError): On HTTP error or invalid JSON.
        """
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                "backend_api_invalid_json",
                provider=self._provider_name,
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ProviderInvalidResponseError(
                    code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                    message=f"Invalid JSON response from {self._provider_name}",
                    provider_name=self._provider_name,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        if not isinstance(data, dict):
            self._logger.warning(
                "backend_api_unexpected_format",
                provider=self._provider_name,
                operation=operation,
                data_type=type(data).__name__,
            )
            return Failure(
                error=ProviderInvalidResponseError(
                    code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                    message=f"Expected object response from {self._provider_name}",
                    provider_name=self._provider_name,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        self._logger.debug(
            "backend_api_succeeded",
            provider=self._provider_name,
            operation=operation,
        )
        return Success(value=data)

    def _execute_and_parse_object(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Execute request and parse response as JSON object.

        Combines _execute_request and _parse_json_object for convenience.
        """
        result = self._execute_request(
            method=method,
            path=path,
            headers=headers,
            json_data=json_data,
            operation=operation,
        )

        if isinstance(result, Failure):
            return result

        return self._parse_json_object(result.value, operation)
