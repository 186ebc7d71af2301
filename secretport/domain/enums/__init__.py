"""Domain enums package.

Usage:
    from secretport.domain.enums import Capability, CapabilitySupport, Severity
"""

from secretport.domain.enums.capability import Capability, CapabilitySupport
from secretport.domain.enums.severity import Severity

__all__ = ["Capability", "CapabilitySupport", "Severity"]
