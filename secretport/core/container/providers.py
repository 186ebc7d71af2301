"""Secrets provider factory.

Selects and builds a SecretsProviderProtocol implementation by slug. Provider
construction failures are startup errors: they raise here instead of being
returned per call.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from secretport.core.config import get_settings
from secretport.core.container.infrastructure import get_logger
from secretport.core.constants import CLOUDFLARE_WORKERS_SECRETS_PROVIDER
from secretport.core.result import Failure, Success
from secretport.domain.providers.registry import (
    get_all_provider_slugs,
    get_provider_metadata,
)

if TYPE_CHECKING:
    from secretport.domain.protocols.secrets_provider_protocol import (
        SecretsProviderProtocol,
    )


@lru_cache()
def get_secrets_provider(slug: str | None = None) -> "SecretsProviderProtocol":
    """Get a secrets provider singleton (app-scoped) by slug.

    Args:
        slug: Registered provider slug. Defaults to settings.secrets_provider.

    Returns:
        Provider implementing SecretsProviderProtocol.

    Raises:
        ValueError: If slug is not a registered provider.
        RuntimeError: If the provider's backend client cannot be built
            (missing or invalid credentials).

    Usage:
        provider = get_secrets_provider("cloudflare_workers_secret")
        provider.put(KeyPath(source="my-worker", env="API_KEY"), "v1")
    """
    settings = get_settings()
    slug = slug or settings.secrets_provider

    if get_provider_metadata(slug) is None:
        raise ValueError(
            f"Unsupported secrets provider: {slug}. "
            f"Supported: {', '.join(get_all_provider_slugs())}"
        )

    if slug == CLOUDFLARE_WORKERS_SECRETS_PROVIDER:
        from secretport.infrastructure.secrets.cloudflare import (
            CloudflareWorkersSecretsProvider,
        )

        result = CloudflareWorkersSecretsProvider.from_credentials(
            settings.cloudflare_credentials(),
            logger=get_logger().bind(provider=slug),
        )
        match result:
            case Success(value=provider):
                return provider
            case Failure(error=err):
                raise RuntimeError(
                    f"Failed to initialize secrets provider {slug}: {err.message}"
                )

    raise ValueError(f"No factory registered for secrets provider: {slug}")
