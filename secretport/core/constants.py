"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `secretport/core/config.py` instead.

Example:
    >>> from secretport.core.constants import CLOUDFLARE_API_BASE_URL
"""

# =============================================================================
# Timeouts
# =============================================================================

PROVIDER_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for outbound secrets backend calls in seconds."""


# =============================================================================
# Cloudflare
# =============================================================================

CLOUDFLARE_API_BASE_URL: str = "https://api.cloudflare.com/client/v4"
"""Cloudflare v4 REST API root."""

CLOUDFLARE_WORKERS_SECRETS_PROVIDER: str = "cloudflare_workers_secret"
"""Stable name of the Cloudflare Workers Secrets provider."""


# =============================================================================
# Redaction and limits
# =============================================================================

DEFAULT_REDACT_WITH: str = "**REDACTED**"
"""Marker shown instead of a secret value."""

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length of backend response bodies kept in error details."""
