"""Base secrets provider with shared contract plumbing.

Backends rarely support every operation of SecretsProviderProtocol. This base
lets an adapter implement only what its backend offers; every operation it
does not override returns Failure(ProviderCapabilityError) with
NOT_IMPLEMENTED, never a silent no-op.

It also carries the one generic algorithm shared by backends without a batch
write endpoint: put_mapping as sequential, fail-fast puts.

The base holds no state. Adapters own their backend client.
"""

from collections.abc import Mapping

from secretport.core.enums import ErrorCode
from secretport.core.result import Failure, Result, Success
from secretport.domain.enums import Capability, CapabilitySupport
from secretport.domain.errors import ProviderCapabilityError, SecretsError
from secretport.domain.value_objects import EnvEntry, KeyPath


class BaseSecretsProvider:
    """Base adapter implementing SecretsProviderProtocol defaults.

    Subclasses must implement:
        - name (property)
    and override the operations their backend supports.
    """

    @property
    def name(self) -> str:
        raise NotImplementedError("Subclass must implement name")

    def put(self, key_path: KeyPath, value: str) -> Result[None, SecretsError]:
        return self._not_implemented(Capability.PUT)

    def put_mapping(
        self, key_path: KeyPath, mapping: Mapping[str, str]
    ) -> Result[None, SecretsError]:
        """Write each key as `{key_path.path}/{key}` via put().

        Keys are written one at a time in mapping order. The first Failure is
        returned as-is; keys already written stay written (no rollback, the
        backend offers no transaction to undo them).
        """
        for key, value in mapping.items():
            result = self.put(key_path.with_env(f"{key_path.path}/{key}"), value)
            if isinstance(result, Failure):
                return result
        return Success(value=None)

    def get(self, key_path: KeyPath) -> Result[EnvEntry, SecretsError]:
        return self._not_implemented(Capability.GET)

    def get_mapping(self, key_path: KeyPath) -> Result[list[EnvEntry], SecretsError]:
        return self._not_implemented(Capability.GET_MAPPING)

    def delete(self, key_path: KeyPath) -> Result[None, SecretsError]:
        return self._not_implemented(Capability.DELETE)

    def delete_mapping(self, key_path: KeyPath) -> Result[None, SecretsError]:
        return self._not_implemented(Capability.DELETE_MAPPING)

    def _unsupported(self, operation: Capability) -> Failure[ProviderCapabilityError]:
        """Failure for an operation the backend cannot perform by design."""
        if operation.is_read:
            message = f"{self.name} does not support read functionality"
        else:
            message = f"{self.name} does not support {operation.label}"
        return Failure(
            error=ProviderCapabilityError(
                code=ErrorCode.SECRET_OPERATION_UNSUPPORTED,
                message=message,
                provider_name=self.name,
                operation=operation,
                support=CapabilitySupport.UNSUPPORTED,
            )
        )

    def _not_implemented(
        self, operation: Capability
    ) -> Failure[ProviderCapabilityError]:
        """Failure for an operation the adapter has not implemented yet."""
        return Failure(
            error=ProviderCapabilityError(
                code=ErrorCode.SECRET_OPERATION_NOT_IMPLEMENTED,
                message=f"{self.name} does not implement {operation.label} yet",
                provider_name=self.name,
                operation=operation,
                support=CapabilitySupport.NOT_IMPLEMENTED,
            )
        )
