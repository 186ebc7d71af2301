"""Secrets provider registry.

Usage:
    from secretport.domain.providers import get_provider_metadata
"""

from secretport.domain.providers.registry import (
    SECRETS_PROVIDER_REGISTRY,
    ProviderCategory,
    ProviderMetadata,
    get_all_provider_slugs,
    get_capability_support,
    get_provider_metadata,
    get_read_capable_providers,
    get_statistics,
)

__all__ = [
    "SECRETS_PROVIDER_REGISTRY",
    "ProviderCategory",
    "ProviderMetadata",
    "get_all_provider_slugs",
    "get_capability_support",
    "get_provider_metadata",
    "get_read_capable_providers",
    "get_statistics",
]
