"""Container module - centralized dependency injection.

Composition root: the only place that reads Settings and decides which
adapter to build. Everything else receives its collaborators explicitly.

    from secretport.core.container import get_logger, get_secrets_provider
"""

from secretport.core.config import get_settings
from secretport.core.container.infrastructure import get_logger
from secretport.core.container.providers import get_secrets_provider

__all__ = [
    "get_logger",
    "get_secrets_provider",
    "get_settings",
]
