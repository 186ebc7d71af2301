"""Domain protocols (ports).

Usage:
    from secretport.domain.protocols import SecretsProviderProtocol
"""

from secretport.domain.protocols.logger_protocol import LoggerProtocol
from secretport.domain.protocols.secrets_provider_protocol import (
    SecretsProviderProtocol,
)

__all__ = ["LoggerProtocol", "SecretsProviderProtocol"]
