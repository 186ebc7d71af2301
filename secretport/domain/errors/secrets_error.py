"""Secrets provider error types.

Three families, all returned inside Failure:

- SecretsValidationError: the KeyPath is unusable for this provider.
  Produced locally; the backend is never called.
- ProviderCapabilityError: the provider cannot perform the operation.
  Never attempted against the backend, never transient.
- ProviderError (provider_error.py): the backend rejected the call.

Usage:
    from secretport.domain.errors import ProviderCapabilityError

    match provider.get(key_path):
        case Failure(error=ProviderCapabilityError(support=CapabilitySupport.UNSUPPORTED)):
            raise SystemExit(f"{provider.name} cannot read secrets")
"""

from dataclasses import dataclass

from secretport.core.errors import DomainError
from secretport.domain.enums import Capability, CapabilitySupport


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretsError(DomainError):
    """Secrets provider failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        provider_name: Provider that produced the error.
        details: Additional context.
    """

    provider_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretsValidationError(SecretsError):
    """KeyPath failed provider-specific validation.

    Attributes:
        field: KeyPath attribute that failed validation ("source", "env").
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderCapabilityError(SecretsError):
    """Operation outside the provider's capability set.

    Callers must treat this as a configuration error: retrying cannot help.

    Attributes:
        operation: Contract operation that was requested.
        support: UNSUPPORTED (permanent backend limitation) or
            NOT_IMPLEMENTED (gap in the provider).
    """

    operation: Capability
    support: CapabilitySupport

    @property
    def is_permanent(self) -> bool:
        return self.support == CapabilitySupport.UNSUPPORTED
