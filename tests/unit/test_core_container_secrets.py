"""Unit tests for container secrets provider selection.

Tests cover:
- get_secrets_provider() builds the provider named by slug or settings
- Error handling for unknown providers and bad credentials
- Credentials flow from environment to provider via Settings

Architecture:
- Unit tests with mocked environment variables
- No network access (provider construction makes no requests)
"""

import os
from unittest.mock import patch

import pytest

from secretport.core.container import get_secrets_provider
from secretport.infrastructure.secrets.cloudflare import CloudflareWorkersSecretsProvider

CLOUDFLARE_ENV = {
    "CLOUDFLARE_API_KEY": "test-api-key",
    "CLOUDFLARE_API_EMAIL": "owner@example.com",
    "CLOUDFLARE_ACCOUNT_ID": "acc-123",
    "ENVIRONMENT": "testing",
}


@pytest.mark.unit
class TestContainerSecretsProviderSelection:
    """Test container get_secrets_provider() selection logic."""

    def test_default_provider_is_cloudflare(self):
        """Test settings.secrets_provider default selects Cloudflare."""
        with patch.dict(os.environ, CLOUDFLARE_ENV, clear=True):
            provider = get_secrets_provider()

        assert isinstance(provider, CloudflareWorkersSecretsProvider)
        assert provider.name == "cloudflare_workers_secret"

    def test_explicit_slug(self):
        """Test provider selected by explicit slug."""
        with patch.dict(os.environ, CLOUDFLARE_ENV, clear=True):
            provider = get_secrets_provider("cloudflare_workers_secret")

        assert provider.name == "cloudflare_workers_secret"

    def test_slug_from_settings(self):
        """Test SECRETS_PROVIDER environment variable is honored."""
        env = {**CLOUDFLARE_ENV, "SECRETS_PROVIDER": "not_a_provider"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError, match="not_a_provider"):
                get_secrets_provider()

    def test_provider_is_singleton(self):
        """Test repeated calls return the same instance."""
        with patch.dict(os.environ, CLOUDFLARE_ENV, clear=True):
            first = get_secrets_provider("cloudflare_workers_secret")
            second = get_secrets_provider("cloudflare_workers_secret")

        assert first is second

    def test_unknown_slug_raises_value_error(self):
        """Test unsupported provider lists supported slugs."""
        with patch.dict(os.environ, CLOUDFLARE_ENV, clear=True):
            with pytest.raises(ValueError) as exc_info:
                get_secrets_provider("vault")

        assert "Unsupported secrets provider: vault" in str(exc_info.value)
        assert "cloudflare_workers_secret" in str(exc_info.value)

    def test_missing_credentials_raise_runtime_error(self):
        """Test client construction failure is a startup error."""
        env = {k: v for k, v in CLOUDFLARE_ENV.items() if k != "CLOUDFLARE_API_EMAIL"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(RuntimeError) as exc_info:
                get_secrets_provider("cloudflare_workers_secret")

        assert "CLOUDFLARE_API_EMAIL" in str(exc_info.value)

    def test_credentials_read_from_environment(self):
        """Test provider factory receives credentials built from settings."""
        with patch.dict(os.environ, CLOUDFLARE_ENV, clear=True):
            with patch.object(
                CloudflareWorkersSecretsProvider,
                "from_credentials",
                wraps=CloudflareWorkersSecretsProvider.from_credentials,
            ) as mock_factory:
                get_secrets_provider("cloudflare_workers_secret")

        credentials = mock_factory.call_args.args[0]
        assert credentials.api_key == "test-api-key"
        assert credentials.api_email == "owner@example.com"
        assert credentials.account_id == "acc-123"
