"""
Canonicalization of detected distro components into import OS identifiers.
"""

import re
from dataclasses import dataclass

from ..exceptions import DistroError
from ..logging_config import get_logger

logger = get_logger('distro')

# Linux families whose import identifier is "<distro>-<major>".
MAJOR_ONLY_DISTROS = {
    'almalinux', 'centos', 'debian', 'ol', 'opensuse', 'rhel', 'rocky', 'sles', 'sles-sap',
}

WINDOWS_CLIENT_VERSIONS = {'7', '8', '10', '11'}
WINDOWS_SERVER_VERSIONS = {'2008', '2012', '2016', '2019', '2022'}
WINDOWS_R2_VERSIONS = {'2008', '2012'}

ARCHITECTURE_ALIASES = {
    '': 'x64',
    'x64': 'x64',
    'x86_64': 'x64',
    'amd64': 'x64',
    'x86': 'x86',
    'i386': 'x86',
    'i686': 'x86',
    'arm64': 'arm64',
    'aarch64': 'arm64',
}

_DISTRO_NAME = re.compile(r'^[a-z0-9-]+$')


@dataclass(frozen=True)
class Release:
    """A canonicalized OS release."""
    distro: str
    major: str
    minor: str
    architecture: str

    @property
    def is_windows(self) -> bool:
        return self.distro == 'windows'

    def as_gcloud_arg(self) -> str:
        """
        Render the identifier accepted by the import tool's ``--os`` flag.

        Returns:
            OS identifier, or an empty string when the release has no
            import identifier
        """
        if self.is_windows:
            if self.major in WINDOWS_SERVER_VERSIONS:
                return f"windows-{self.major}{self.minor}"
            return f"windows-{self.major}-{self.architecture}"

        if self.distro == 'ubuntu':
            osid = f"ubuntu-{self.major}{self.minor.zfill(2)}"
        elif self.distro in MAJOR_ONLY_DISTROS:
            osid = f"{self.distro}-{self.major}"
        else:
            return ""

        if self.architecture == 'arm64':
            osid += '-arm64'
        return osid


def normalize_architecture(architecture: str) -> str:
    try:
        return ARCHITECTURE_ALIASES[architecture.lower()]
    except KeyError:
        raise DistroError(f"architecture '{architecture}' is not recognized") from None


def from_components(distro: str, major: str, minor: str, architecture: str) -> Release:
    """
    Build a Release from detected components.

    Args:
        distro: Distro short name, e.g. "centos"
        major: Major version, e.g. "7"
        minor: Minor version, may be empty
        architecture: Detected architecture, e.g. "x86_64"

    Returns:
        Release for the components

    Raises:
        DistroError: If the components do not describe a valid release
    """
    distro = distro.lower()
    if not distro:
        raise DistroError("distro name is required")
    if not _DISTRO_NAME.match(distro):
        raise DistroError(f"distro name '{distro}' is not valid")

    arch = normalize_architecture(architecture)

    if not major:
        raise DistroError(f"{distro}: major version is required")

    if distro == 'windows':
        _check_windows_version(major, minor)
        return Release(distro, major, minor, arch)

    if not major.isdigit():
        raise DistroError(f"{distro}: major version '{major}' is not numeric")
    if minor and not minor.isdigit():
        raise DistroError(f"{distro}: minor version '{minor}' is not numeric")
    if distro == 'ubuntu' and not minor:
        raise DistroError("ubuntu: minor version is required")

    release = Release(distro, major, minor, arch)
    logger.debug(f"Canonicalized {distro} {major}.{minor} ({architecture}) as {release}")
    return release


def _check_windows_version(major: str, minor: str) -> None:
    version = f"{major}.{minor}" if minor else major
    if major in WINDOWS_SERVER_VERSIONS:
        if minor and not (minor == 'r2' and major in WINDOWS_R2_VERSIONS):
            raise DistroError(f"windows: version '{version}' is not recognized")
    elif major in WINDOWS_CLIENT_VERSIONS:
        if minor:
            raise DistroError(f"windows: version '{version}' is not recognized")
    else:
        raise DistroError(f"windows: version '{version}' is not recognized")
