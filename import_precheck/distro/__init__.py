"""
Distro canonicalization: detected components to import OS identifiers.
"""

from .release import Release, from_components
from .windows import windows_server_version_for_nt_version

__all__ = ['Release', 'from_components', 'windows_server_version_for_nt_version']
