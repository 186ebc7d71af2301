"""Cloudflare Workers Secrets adapter.

Usage:
    from secretport.infrastructure.secrets.cloudflare import CloudflareWorkersSecretsProvider
"""

from secretport.infrastructure.secrets.cloudflare.api_client import (
    CloudflareWorkersSecretsAPI,
)
from secretport.infrastructure.secrets.cloudflare.client_protocol import (
    WorkersSecretsClientProtocol,
)
from secretport.infrastructure.secrets.cloudflare.models import (
    WorkerSecretBindingType,
    WorkersPutSecretRequest,
    WorkersPutSecretResponse,
)
from secretport.infrastructure.secrets.cloudflare.workers_secrets_provider import (
    CloudflareWorkersSecretsProvider,
)

__all__ = [
    "CloudflareWorkersSecretsAPI",
    "CloudflareWorkersSecretsProvider",
    "WorkerSecretBindingType",
    "WorkersPutSecretRequest",
    "WorkersPutSecretResponse",
    "WorkersSecretsClientProtocol",
]
