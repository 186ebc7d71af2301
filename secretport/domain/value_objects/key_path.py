"""KeyPath value object.

Addresses one logical secret independently of the backend it lives in.
Adapters interpret the fields they need:

- path: logical hierarchical path ("api/prod"), the prefix for mapping
  operations.
- env: environment-variable-style alias for the secret's name.
- field: backend-specific field name, preferred over env when naming.
- source: backend resource the secret is partitioned under (for Workers
  Secrets, the Worker script name).

Immutable: every "with_*" method returns a new instance.
"""

from dataclasses import dataclass, replace

from secretport.core.constants import DEFAULT_REDACT_WITH
from secretport.domain.enums import Severity
from secretport.domain.value_objects.env_entry import EnvEntry


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyPath:
    """Logical address of a secret.

    Attributes:
        path: Logical hierarchical path.
        env: Environment-variable-style alias for the secret name.
        field: Backend-specific field name (takes precedence over env).
        source: Backend resource/container the secret belongs to.
        sink: Destination resource when copying between providers.
        severity: Exposure severity copied onto resolved entries.
        redact_with: Marker shown instead of the value.
        optional: Whether a missing secret is acceptable to the caller.

    Example:
        >>> kp = KeyPath(path="cfg", source="my-worker")
        >>> kp.with_env("cfg/a").env
        'cfg/a'
    """

    path: str = ""
    env: str = ""
    field: str = ""
    source: str = ""
    sink: str = ""
    severity: Severity = Severity.HIGH
    redact_with: str = DEFAULT_REDACT_WITH
    optional: bool = False

    def with_env(self, env: str) -> "KeyPath":
        """Return a copy addressing a different env alias."""
        return replace(self, env=env)

    def with_field(self, field: str) -> "KeyPath":
        """Return a copy addressing a different backend field."""
        return replace(self, field=field)

    def switch_path(self, path: str) -> "KeyPath":
        """Return a copy under a different logical path."""
        return replace(self, path=path)

    def found(self, *, key: str, value: str, provider_name: str) -> EnvEntry:
        """Build an entry for a secret resolved from this path."""
        return EnvEntry(
            key=key,
            value=value,
            provider_name=provider_name,
            resolved_path=self.path,
            is_found=True,
            field=self.field,
            source=self.source,
            sink=self.sink,
            severity=self.severity,
            redact_with=self.redact_with,
        )

    def missing(self, *, key: str, provider_name: str) -> EnvEntry:
        """Build an entry recording that this path resolved to nothing."""
        return EnvEntry(
            key=key,
            value="",
            provider_name=provider_name,
            resolved_path=self.path,
            is_found=False,
            field=self.field,
            source=self.source,
            sink=self.sink,
            severity=self.severity,
            redact_with=self.redact_with,
        )
