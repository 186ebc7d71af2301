"""Secrets Provider Registry - single source of truth for provider metadata.

Each backend adapter has one ProviderMetadata entry describing what it is,
which settings it needs, and which contract operations it supports. The
container selects adapters by slug from here, and a compliance test checks
that each adapter's runtime behavior agrees with its declared capabilities.

Usage:
    from secretport.domain.providers.registry import get_capability_support

    support = get_capability_support("cloudflare_workers_secret", Capability.GET)
    if support != CapabilitySupport.SUPPORTED:
        ...

Adding a provider:
    1. Add a ProviderMetadata entry to SECRETS_PROVIDER_REGISTRY
    2. Implement the adapter in secretport/infrastructure/secrets/{slug}/
    3. Add a factory case in secretport/core/container/providers.py
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from secretport.core.constants import CLOUDFLARE_WORKERS_SECRETS_PROVIDER
from secretport.domain.enums import Capability, CapabilitySupport


class ProviderCategory(str, Enum):
    """Kinds of secrets backend."""

    KEY_VALUE = "key_value"
    """Plain key/value stores (etcd, Consul KV, Redis)."""

    CLOUD_SECRET_MANAGER = "cloud_secret_manager"
    """Managed cloud secret stores (AWS, GCP, Azure, Cloudflare)."""

    VAULT = "vault"
    """Dedicated vault servers (HashiCorp Vault, 1Password Connect)."""

    IN_MEMORY = "in_memory"
    """Process-local stores, used for tests and local development."""


def _capabilities(
    **overrides: CapabilitySupport,
) -> Mapping[Capability, CapabilitySupport]:
    table = {capability: CapabilitySupport.SUPPORTED for capability in Capability}
    for name, support in overrides.items():
        table[Capability(name)] = support
    return MappingProxyType(table)


@dataclass(frozen=True, kw_only=True)
class ProviderMetadata:
    """Metadata for a single secrets provider adapter.

    Attributes:
        slug: Unique provider identifier; equals the adapter's `name`.
        display_name: Human-readable provider name.
        category: Kind of backend.
        capabilities: Support level of every contract operation.
        required_settings: Settings attributes that must be non-empty.
        documentation_url: Backend API documentation.
        is_production_ready: False for experimental adapters.
    """

    slug: str
    display_name: str
    category: ProviderCategory
    capabilities: Mapping[Capability, CapabilitySupport] = field(
        default_factory=_capabilities
    )
    required_settings: list[str] | None = None
    documentation_url: str | None = None
    is_production_ready: bool = True

    def supports(self, capability: Capability) -> bool:
        return self.capabilities[capability] == CapabilitySupport.SUPPORTED

    @property
    def is_read_capable(self) -> bool:
        return self.supports(Capability.GET) or self.supports(Capability.GET_MAPPING)


# =============================================================================
# Provider Registry (Single Source of Truth)
# =============================================================================

SECRETS_PROVIDER_REGISTRY: list[ProviderMetadata] = [
    ProviderMetadata(
        slug=CLOUDFLARE_WORKERS_SECRETS_PROVIDER,
        display_name="Cloudflare Workers Secrets",
        category=ProviderCategory.CLOUD_SECRET_MANAGER,
        capabilities=_capabilities(
            get=CapabilitySupport.UNSUPPORTED,  # Secret values are never readable
            get_mapping=CapabilitySupport.UNSUPPORTED,
            delete_mapping=CapabilitySupport.NOT_IMPLEMENTED,
        ),
        required_settings=[
            "cloudflare_api_key",
            "cloudflare_api_email",
            "cloudflare_account_id",
        ],
        documentation_url="https://developers.cloudflare.com/api/resources/workers/subresources/scripts/subresources/secrets/",
    ),
]
"""All registered secrets providers.

Current Providers:
    - cloudflare_workers_secret: Cloudflare Workers Secrets (write-only)
"""


# =============================================================================
# Helper Functions
# =============================================================================


def get_provider_metadata(slug: str) -> ProviderMetadata | None:
    """Get provider metadata by slug.

    Args:
        slug: Provider identifier (e.g., "cloudflare_workers_secret").

    Returns:
        ProviderMetadata if found, None otherwise.
    """
    return next((p for p in SECRETS_PROVIDER_REGISTRY if p.slug == slug), None)


def get_all_provider_slugs() -> list[str]:
    """Get all registered provider slugs."""
    return [p.slug for p in SECRETS_PROVIDER_REGISTRY]


def get_capability_support(slug: str, capability: Capability) -> CapabilitySupport:
    """Get how a provider supports one contract operation.

    Args:
        slug: Provider identifier.
        capability: Contract operation.

    Returns:
        CapabilitySupport for the operation.

    Raises:
        KeyError: If no provider is registered under slug.
    """
    metadata = get_provider_metadata(slug)
    if metadata is None:
        raise KeyError(slug)
    return metadata.capabilities[capability]


def get_read_capable_providers() -> list[str]:
    """Get slugs of providers that can read secrets back."""
    return [p.slug for p in SECRETS_PROVIDER_REGISTRY if p.is_read_capable]


def get_statistics() -> dict[str, int]:
    """Get provider registry statistics.

    Returns:
        Dictionary with provider counts:
            - total_providers
            - read_capable
            - write_only
            - production_ready
    """
    read_capable = get_read_capable_providers()
    return {
        "total_providers": len(SECRETS_PROVIDER_REGISTRY),
        "read_capable": len(read_capable),
        "write_only": len(SECRETS_PROVIDER_REGISTRY) - len(read_capable),
        "production_ready": len(
            [p for p in SECRETS_PROVIDER_REGISTRY if p.is_production_ready]
        ),
    }
