"""Secrets infrastructure package.

Adapters implementing SecretsProviderProtocol, one subpackage per backend.
Use secretport.core.container.get_secrets_provider() to obtain one by name.

Architecture:
- BaseSecretsProvider: capability defaults + sequential put_mapping
- BaseSecretsAPIClient: shared httpx error handling for backend clients
- cloudflare: Cloudflare Workers Secrets (write-only)
"""

from secretport.infrastructure.secrets.base_api_client import BaseSecretsAPIClient
from secretport.infrastructure.secrets.base_provider import BaseSecretsProvider

__all__ = [
    "BaseSecretsAPIClient",
    "BaseSecretsProvider",
]
