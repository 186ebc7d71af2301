"""Infrastructure dependency factories.

Application-scoped singletons for ambient services (logging).
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from secretport.core.config import get_settings
from secretport.core.enums import Environment

if TYPE_CHECKING:
    from secretport.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from secretport.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
