"""Structured logging adapters.

Usage:
    from secretport.infrastructure.logging import ConsoleAdapter
"""

from secretport.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
