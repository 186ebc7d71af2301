"""Domain errors package.

Usage:
    from secretport.domain.errors import SecretsError, ProviderCapabilityError
    from secretport.domain.errors import ProviderError, ProviderAuthenticationError
"""

from secretport.domain.errors.provider_error import (
    ProviderAuthenticationError,
    ProviderError,
    ProviderInvalidResponseError,
    ProviderNotFoundError,
    ProviderRateLimitError,
    ProviderUnavailableError,
)
from secretport.domain.errors.secrets_error import (
    ProviderCapabilityError,
    SecretsError,
    SecretsValidationError,
)

__all__ = [
    "SecretsError",
    "SecretsValidationError",
    "ProviderCapabilityError",
    # Backend errors
    "ProviderError",
    "ProviderAuthenticationError",
    "ProviderUnavailableError",
    "ProviderRateLimitError",
    "ProviderNotFoundError",
    "ProviderInvalidResponseError",
]
