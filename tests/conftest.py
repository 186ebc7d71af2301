"""Shared pytest fixtures.

Provides:
1. A recording fake of the Workers secrets backend client
2. A provider wired to that fake
3. Cloudflare credentials pointing at a test API root
4. Cache isolation for lru_cached settings and container factories
"""

from dataclasses import dataclass, field

import pytest

from secretport.core.config import CloudflareCredentials, get_settings
from secretport.core.container import get_logger, get_secrets_provider
from secretport.core.result import Failure, Result, Success
from secretport.domain.errors import ProviderError
from secretport.infrastructure.secrets.cloudflare import (
    CloudflareWorkersSecretsProvider,
    WorkersPutSecretRequest,
    WorkersPutSecretResponse,
)

TEST_API_BASE_URL = "https://api.cloudflare.test/client/v4"
TEST_ACCOUNT_ID = "acc-123"


@dataclass
class RecordingWorkersSecretsClient:
    """In-memory stand-in for the Workers secrets backend.

    Keeps `secrets[script][name] = value` so tests can observe exactly what
    reached the backend. `failures` maps a 1-based call number to the
    Failure that call should return instead of applying the write.
    """

    secrets: dict[str, dict[str, str]] = field(default_factory=dict)
    calls: list[tuple] = field(default_factory=list)
    failures: dict[int, Failure[ProviderError]] = field(default_factory=dict)

    def set_workers_secret(
        self, script_name: str, request: WorkersPutSecretRequest
    ) -> Result[WorkersPutSecretResponse, ProviderError]:
        self.calls.append(("set", script_name, request))
        if len(self.calls) in self.failures:
            return self.failures[len(self.calls)]
        self.secrets.setdefault(script_name, {})[request.name] = request.text
        return Success(
            value=WorkersPutSecretResponse(name=request.name, type=request.type.value)
        )

    def delete_workers_secret(
        self, script_name: str, secret_name: str
    ) -> Result[None, ProviderError]:
        self.calls.append(("delete", script_name, secret_name))
        if len(self.calls) in self.failures:
            return self.failures[len(self.calls)]
        self.secrets.get(script_name, {}).pop(secret_name, None)
        return Success(value=None)


@pytest.fixture
def fake_client() -> RecordingWorkersSecretsClient:
    return RecordingWorkersSecretsClient()


@pytest.fixture
def provider(fake_client: RecordingWorkersSecretsClient) -> CloudflareWorkersSecretsProvider:
    return CloudflareWorkersSecretsProvider(client=fake_client)


@pytest.fixture
def credentials() -> CloudflareCredentials:
    return CloudflareCredentials(
        api_key="test-api-key",
        api_email="owner@example.com",
        account_id=TEST_ACCOUNT_ID,
        base_url=TEST_API_BASE_URL,
        timeout=5.0,
    )


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset lru_cached singletons so env changes are seen per test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_secrets_provider.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_secrets_provider.cache_clear()
