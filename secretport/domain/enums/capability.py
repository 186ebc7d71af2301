"""Provider capability enums.

Every provider exposes the same six operations, but backends differ in
which of them actually work. CapabilitySupport is the tag callers branch on
when an operation comes back as a ProviderCapabilityError.
"""

from enum import Enum


class Capability(str, Enum):
    """Operations of the secrets provider contract."""

    PUT = "put"
    PUT_MAPPING = "put_mapping"
    GET = "get"
    GET_MAPPING = "get_mapping"
    DELETE = "delete"
    DELETE_MAPPING = "delete_mapping"

    @property
    def is_read(self) -> bool:
        return self in (Capability.GET, Capability.GET_MAPPING)

    @property
    def label(self) -> str:
        """camelCase operation name used in messages ("deleteMapping")."""
        head, *rest = self.value.split("_")
        return head + "".join(part.title() for part in rest)


class CapabilitySupport(str, Enum):
    """Whether a provider can perform a capability."""

    SUPPORTED = "supported"
    """Operation is performed against the backend."""

    UNSUPPORTED = "unsupported"
    """Backend cannot do this by design. Treat as a configuration error."""

    NOT_IMPLEMENTED = "not_implemented"
    """Backend could do this but the provider does not yet."""
