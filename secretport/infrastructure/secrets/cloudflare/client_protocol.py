"""Backend client port for the Workers Secrets adapter.

The adapter depends on this narrow protocol, not on the HTTP client, so
tests can substitute a recording fake.
"""

from typing import Protocol

from secretport.core.result import Result
from secretport.domain.errors import ProviderError
from secretport.infrastructure.secrets.cloudflare.models import (
    WorkersPutSecretRequest,
    WorkersPutSecretResponse,
)


class WorkersSecretsClientProtocol(Protocol):
    """Set and delete secrets of one Worker script."""

    def set_workers_secret(
        self, script_name: str, request: WorkersPutSecretRequest
    ) -> Result[WorkersPutSecretResponse, ProviderError]:
        """Create or overwrite a secret on script_name."""
        ...

    def delete_workers_secret(
        self, script_name: str, secret_name: str
    ) -> Result[None, ProviderError]:
        """Delete a secret from script_name."""
        ...
