"""
OS detection data types.
"""

from .osinfo import LINUX, WINDOWS, OSFamily, OSInfo, classify_short_name

__all__ = ['LINUX', 'WINDOWS', 'OSFamily', 'OSInfo', 'classify_short_name']
