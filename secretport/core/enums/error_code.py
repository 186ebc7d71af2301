"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention.

Categories:
- Validation errors (checked locally, no backend call made)
- Capability errors (operation unsupported or not yet implemented)
- Backend errors (returned by the remote secrets store)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    SECRET_SOURCE_MISSING = "secret_source_missing"
    SECRET_KEY_REQUIRED = "secret_key_required"

    # Capability errors
    SECRET_OPERATION_UNSUPPORTED = "secret_operation_unsupported"
    SECRET_OPERATION_NOT_IMPLEMENTED = "secret_operation_not_implemented"

    # Backend (provider API) errors
    PROVIDER_CREDENTIAL_INVALID = "provider_credential_invalid"
    PROVIDER_AUTHENTICATION_FAILED = "provider_authentication_failed"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    PROVIDER_RATE_LIMITED = "provider_rate_limited"
    PROVIDER_RESOURCE_NOT_FOUND = "provider_resource_not_found"
    PROVIDER_INVALID_RESPONSE = "provider_invalid_response"
