"""
Prechecks run before an image import.
"""

from .base import Check
from .os_version import OSVersionCheck, split_os_version
from .registry import CheckRegistry

default_registry = CheckRegistry()
default_registry.register(OSVersionCheck.NAME, OSVersionCheck)

__all__ = ['Check', 'CheckRegistry', 'OSVersionCheck', 'default_registry', 'split_os_version']
