"""Cloudflare Workers Secrets provider.

Write-only adapter: the Workers API can set and delete a secret on a Worker
script but never returns its value.

KeyPath mapping:
    - source: Worker script name (required; secrets are per script)
    - field, else env: secret binding name
    - path: prefix joined to mapping keys in put_mapping

Capabilities:
    put, put_mapping, delete   -> performed against the backend
    get, get_mapping           -> UNSUPPORTED (no read-back by design)
    delete_mapping             -> NOT_IMPLEMENTED
"""

from collections.abc import Mapping

import httpx
import structlog

from secretport.core.config import CloudflareCredentials
from secretport.core.constants import CLOUDFLARE_WORKERS_SECRETS_PROVIDER
from secretport.core.enums import ErrorCode
from secretport.core.result import Failure, Result, Success
from secretport.domain.enums import Capability
from secretport.domain.errors import SecretsError, SecretsValidationError
from secretport.domain.protocols import LoggerProtocol
from secretport.domain.value_objects import EnvEntry, KeyPath
from secretport.infrastructure.secrets.base_provider import BaseSecretsProvider
from secretport.infrastructure.secrets.cloudflare.api_client import (
    CloudflareWorkersSecretsAPI,
)
from secretport.infrastructure.secrets.cloudflare.client_protocol import (
    WorkersSecretsClientProtocol,
)
from secretport.infrastructure.secrets.cloudflare.models import (
    WorkerSecretBindingType,
    WorkersPutSecretRequest,
)


class CloudflareWorkersSecretsProvider(BaseSecretsProvider):
    """Secrets provider backed by Cloudflare Workers Secrets.

    Validation errors are returned before any backend call. Backend errors
    are returned exactly as the client produced them: no retry, no
    reclassification, no added context.

    Example:
        >>> provider = CloudflareWorkersSecretsProvider(client=api)
        >>> provider.put(KeyPath(source="my-worker", env="API_KEY"), "v1")
        Success(value=None)
    """

    def __init__(
        self,
        *,
        client: WorkersSecretsClientProtocol,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize with a backend client.

        Args:
            client: Backend client with set/delete secret operations.
            logger: Structured logger (defaults to a structlog logger).
        """
        self._client = client
        self._logger = logger or structlog.get_logger(CLOUDFLARE_WORKERS_SECRETS_PROVIDER)

    @classmethod
    def from_credentials(
        cls,
        credentials: CloudflareCredentials,
        *,
        logger: LoggerProtocol | None = None,
        http_client: httpx.Client | None = None,
    ) -> Result["CloudflareWorkersSecretsProvider", SecretsError]:
        """Build the provider with an HTTP client for the given credentials.

        Returns:
            Success(provider), or the client construction Failure unchanged.
        """
        match CloudflareWorkersSecretsAPI.create(credentials, http_client=http_client):
            case Success(value=api):
                return Success(value=cls(client=api, logger=logger))
            case Failure(error=error):
                return Failure(error=error)

    @property
    def name(self) -> str:
        return CLOUDFLARE_WORKERS_SECRETS_PROVIDER

    def put(self, key_path: KeyPath, value: str) -> Result[None, SecretsError]:
        """Create or overwrite one secret on the Worker named by key_path.source.

        Last write wins: an existing secret with the same name is replaced.
        """
        source_check = self._require_source(key_path)
        if source_check is not None:
            return source_check

        name_result = self._get_secret_name(key_path)
        if isinstance(name_result, Failure):
            return name_result
        secret_name = name_result.value

        request = WorkersPutSecretRequest(
            name=secret_name,
            text=value,
            type=WorkerSecretBindingType.SECRET_TEXT,
        )
        result = self._client.set_workers_secret(key_path.source, request)
        if isinstance(result, Failure):
            self._logger.warning(
                "secret_put_failed",
                provider=self.name,
                source=key_path.source,
                secret_name=secret_name,
                error_code=result.error.code.value,
            )
            return result

        self._logger.info(
            "secret_put",
            provider=self.name,
            source=key_path.source,
            secret_name=secret_name,
        )
        return Success(value=None)

    def put_mapping(
        self, key_path: KeyPath, mapping: Mapping[str, str]
    ) -> Result[None, SecretsError]:
        """Write every key of mapping as `{path}/{key}` on key_path.source.

        Fail-fast and NOT atomic: on Failure, keys written before the failing
        one remain on the Worker.
        """
        source_check = self._require_source(key_path)
        if source_check is not None:
            return source_check
        return super().put_mapping(key_path, mapping)

    def delete(self, key_path: KeyPath) -> Result[None, SecretsError]:
        """Delete one secret from the Worker named by key_path.source.

        Deleting a secret that does not exist is passed through as the
        backend reports it; it is not turned into success.
        """
        source_check = self._require_source(key_path)
        if source_check is not None:
            return source_check

        name_result = self._get_secret_name(key_path)
        if isinstance(name_result, Failure):
            return name_result
        secret_name = name_result.value

        result = self._client.delete_workers_secret(key_path.source, secret_name)
        if isinstance(result, Failure):
            self._logger.warning(
                "secret_delete_failed",
                provider=self.name,
                source=key_path.source,
                secret_name=secret_name,
                error_code=result.error.code.value,
            )
            return result

        self._logger.info(
            "secret_deleted",
            provider=self.name,
            source=key_path.source,
            secret_name=secret_name,
        )
        return Success(value=None)

    def get(self, key_path: KeyPath) -> Result[EnvEntry, SecretsError]:
        return self._unsupported(Capability.GET)

    def get_mapping(self, key_path: KeyPath) -> Result[list[EnvEntry], SecretsError]:
        return self._unsupported(Capability.GET_MAPPING)

    # delete_mapping() inherited from BaseSecretsProvider (NOT_IMPLEMENTED)

    def _require_source(self, key_path: KeyPath) -> Failure[SecretsValidationError] | None:
        if key_path.source:
            return None
        return Failure(
            error=SecretsValidationError(
                code=ErrorCode.SECRET_SOURCE_MISSING,
                message="`source` field is missing",
                provider_name=self.name,
                field="source",
            )
        )

    def _get_secret_name(self, key_path: KeyPath) -> Result[str, SecretsValidationError]:
        """Resolve the binding name: field wins over env."""
        name = key_path.field or key_path.env
        if not name:
            return Failure(
                error=SecretsValidationError(
                    code=ErrorCode.SECRET_KEY_REQUIRED,
                    message='key required for fetching secrets. Received ""',
                    provider_name=self.name,
                    field="env",
                )
            )
        return Success(value=name)
