"""
Custom exceptions for the image import prechecks.
"""


class PrecheckError(Exception):
    """Base exception class for all precheck errors."""
    pass


class ConfigurationError(PrecheckError):
    """Raised when configuration is invalid."""
    pass


class OSInfoError(PrecheckError):
    """Raised when OS detection data cannot be interpreted."""
    pass


class DistroError(PrecheckError):
    """Raised when distro components cannot be canonicalized into a release."""
    pass


class WindowsVersionError(PrecheckError):
    """Raised when an NT version has no known marketing version."""

    def __init__(self, message: str, major: str = None, minor: str = None):
        self.major = major
        self.minor = minor

        if major is not None:
            nt_version = f"{major}.{minor}" if minor else major
            message = f"NT version '{nt_version}': {message}"

        super().__init__(message)


class CatalogError(PrecheckError):
    """Raised when the supported OS catalog cannot be loaded."""

    def __init__(self, message: str, file_path: str = None):
        self.file_path = file_path

        if file_path:
            message = f"Supported OS catalog error in '{file_path}': {message}"

        super().__init__(message)


class UnsupportedOSError(PrecheckError):
    """Raised when an OS identifier is not in the supported OS catalog."""

    def __init__(self, osid: str):
        self.osid = osid
        super().__init__(f"'{osid}' is not a supported OS for import")


class ReportStateError(PrecheckError):
    """Raised when a report's terminal result is set more than once."""
    pass
