"""Backend error types.

Returned by backend clients when the remote secrets store rejects or fails
a call. Provider adapters pass these through unchanged: no retry, no
reclassification.

Usage:
    from secretport.domain.errors import ProviderError, ProviderAuthenticationError
    from secretport.core.result import Failure

    return Failure(error=ProviderAuthenticationError(
        code=ErrorCode.PROVIDER_AUTHENTICATION_FAILED,
        message="Cloudflare API key is invalid",
        provider_name="cloudflare_workers_secret",
    ))
"""

from dataclasses import dataclass

from secretport.domain.errors.secrets_error import SecretsError


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderError(SecretsError):
    """Base backend error.

    Attributes:
        code: ErrorCode.
        message: Human-readable message.
        provider_name: Name of the provider.
        status_code: HTTP status returned by the backend, if any.
        details: Additional context (backend error list, response body).
    """

    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderAuthenticationError(ProviderError):
    """Backend refused the credentials (401/403).

    Recovery: fix CLOUDFLARE_API_KEY / CLOUDFLARE_API_EMAIL.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderUnavailableError(ProviderError):
    """Backend unreachable: timeout, connection failure or 5xx.

    Attributes:
        is_transient: Whether a later retry may succeed.
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderRateLimitError(ProviderError):
    """Backend returned 429 Too Many Requests.

    Attributes:
        retry_after: Seconds to wait before retrying (from Retry-After header).
    """

    retry_after: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderNotFoundError(ProviderError):
    """Backend resource (script, secret) does not exist (404)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderInvalidResponseError(ProviderError):
    """Backend returned an error envelope or an unexpected response.

    Attributes:
        response_body: Raw (truncated) response body for debugging.
    """

    response_body: str | None = None
