"""EnvEntry value object.

A resolved key/value pair returned by read-capable providers, with the
provenance of the KeyPath it came from.
"""

from dataclasses import dataclass

from secretport.core.constants import DEFAULT_REDACT_WITH
from secretport.domain.enums import Severity


@dataclass(frozen=True, slots=True, kw_only=True)
class EnvEntry:
    """Resolved secret.

    Attributes:
        key: Name the secret was resolved under.
        value: Secret value (never shown by repr).
        provider_name: Provider that resolved it.
        resolved_path: Logical path it was resolved from.
        is_found: False when the provider looked and found nothing.
        field: Field of the originating KeyPath.
        source: Source of the originating KeyPath.
        sink: Sink of the originating KeyPath.
        severity: Exposure severity.
        redact_with: Marker shown instead of the value.
    """

    key: str
    value: str
    provider_name: str
    resolved_path: str
    is_found: bool = True
    field: str = ""
    source: str = ""
    sink: str = ""
    severity: Severity = Severity.HIGH
    redact_with: str = DEFAULT_REDACT_WITH

    def redacted(self) -> str:
        return self.redact_with

    def __repr__(self) -> str:
        return (
            f"EnvEntry(key={self.key!r}, value={self.redact_with!r}, "
            f"provider_name={self.provider_name!r}, "
            f"resolved_path={self.resolved_path!r}, is_found={self.is_found!r})"
        )
