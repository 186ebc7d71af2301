"""Severity of a leaked secret.

Carried on KeyPath and copied onto EnvEntry so callers (scanners, redactors)
can rank findings without asking the provider again.
"""

from enum import Enum


class Severity(str, Enum):
    """How damaging exposure of a secret would be."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"
