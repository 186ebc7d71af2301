"""Domain value objects.

Usage:
    from secretport.domain.value_objects import EnvEntry, KeyPath
"""

from secretport.domain.value_objects.env_entry import EnvEntry
from secretport.domain.value_objects.key_path import KeyPath

__all__ = ["EnvEntry", "KeyPath"]
