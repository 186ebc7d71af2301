"""Secrets provider protocol (port) for hexagonal architecture.

This protocol is the single contract every secrets backend adapter
implements. Callers build a KeyPath, pick a provider by name, and call one
operation; they never need to know which backend is behind it.

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (CloudflareWorkersSecretsProvider, ...)
    - Callers use the protocol (backend-agnostic)

Capability subsetting:
    A backend that cannot perform an operation still implements it, and
    returns Failure(ProviderCapabilityError). Its `support` field tells
    "unsupported by design" (UNSUPPORTED) apart from "not yet implemented"
    (NOT_IMPLEMENTED). Silent no-ops are not allowed.

Mapping operations:
    put_mapping is fail-fast and NOT atomic. When it returns a Failure, a
    prefix of the mapping may already be written; nothing is rolled back.
"""

from collections.abc import Mapping
from typing import Protocol

from secretport.core.result import Result
from secretport.domain.errors import SecretsError
from secretport.domain.value_objects import EnvEntry, KeyPath


class SecretsProviderProtocol(Protocol):
    """Protocol for secrets backend adapters.

    Implementations:
        - CloudflareWorkersSecretsProvider: Cloudflare Workers Secrets (write-only)
    """

    @property
    def name(self) -> str:
        """Stable identifier used for diagnostics and provider selection."""
        ...

    def put(self, key_path: KeyPath, value: str) -> Result[None, SecretsError]:
        """Create or overwrite one secret.

        Args:
            key_path: Address of the secret.
            value: Secret value.

        Returns:
            Success(None) once the backend accepted the write.
            Failure(SecretsError) on validation, capability or backend error.
        """
        ...

    def put_mapping(
        self, key_path: KeyPath, mapping: Mapping[str, str]
    ) -> Result[None, SecretsError]:
        """Create or overwrite a batch of secrets under key_path.path.

        Args:
            key_path: Common address; its path is the key prefix.
            mapping: Key to value.

        Returns:
            Success(None) if every key was written.
            Failure(SecretsError) for the first key that failed.
        """
        ...

    def get(self, key_path: KeyPath) -> Result[EnvEntry, SecretsError]:
        """Read one secret."""
        ...

    def get_mapping(self, key_path: KeyPath) -> Result[list[EnvEntry], SecretsError]:
        """Read all secrets under key_path.path."""
        ...

    def delete(self, key_path: KeyPath) -> Result[None, SecretsError]:
        """Remove one secret."""
        ...

    def delete_mapping(self, key_path: KeyPath) -> Result[None, SecretsError]:
        """Remove all secrets under key_path.path."""
        ...
