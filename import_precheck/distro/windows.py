"""
Translation between Windows NT version numbers and marketing versions.
"""

from typing import Tuple

from ..exceptions import WindowsVersionError

# NT (major, minor) -> server marketing (major, minor). NT 10.0 covers Server
# 2016 and later; the oldest release is reported.
NT_TO_SERVER_VERSION = {
    ("6", "0"): ("2008", ""),
    ("6", "1"): ("2008", "r2"),
    ("6", "2"): ("2012", ""),
    ("6", "3"): ("2012", "r2"),
    ("10", "0"): ("2016", ""),
}


def windows_server_version_for_nt_version(major: str, minor: str) -> Tuple[str, str]:
    """
    Get the Windows Server marketing version for an NT version.

    Args:
        major: NT major version, e.g. "6"
        minor: NT minor version, e.g. "3"

    Returns:
        Tuple of (marketing major, marketing minor), e.g. ("2012", "r2")

    Raises:
        WindowsVersionError: If the NT version has no known server release
    """
    try:
        return NT_TO_SERVER_VERSION[(major, minor)]
    except KeyError:
        raise WindowsVersionError("no matching Windows Server version", major, minor) from None
