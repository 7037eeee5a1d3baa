"""
Image Import Precheck

Checks run against a disk before it is imported as a cloud image.
"""

__version__ = "0.1.0"


def get_version():
    """Get the current version of the image import prechecks."""
    return __version__


__all__ = ['get_version']
