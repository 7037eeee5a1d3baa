"""
Precheck that verifies the disk's operating system is importable.
"""

from typing import Callable, Optional, Tuple

from .base import Check
from .. import distro
from ..config import DOCS_URL, Config
from ..exceptions import DistroError, PrecheckError, WindowsVersionError
from ..logging_config import get_logger
from ..models import Report
from ..os_detection import LINUX, OSFamily, OSInfo
from ..supported_os import SupportedOSCatalog

logger = get_logger('checks.os_version')

# Some systems are only importable as bring-your-own-license, so both variants
# are tried, standard licensing first.
LICENSE_SUFFIXES = ("", "-byol")


def split_os_version(version: str) -> Tuple[str, str]:
    """
    Split a version string into major and minor components.

    Anything after a second dot is discarded: "7.9.2009" gives ("7", "9").
    """
    if not version:
        return "", ""
    if "." not in version:
        return version, ""
    parts = version.split(".")
    return parts[0], parts[1]


class OSVersionCheck(Check):
    """Verifies that the OS detected on a disk is supported for import."""

    NAME = "OS Version Check"

    def __init__(self, os_info: OSInfo,
                 catalog: Optional[SupportedOSCatalog] = None,
                 release_factory: Callable[[str, str, str, str], distro.Release] = distro.from_components,
                 windows_translator: Callable[[str, str], Tuple[str, str]] = distro.windows_server_version_for_nt_version,
                 docs_url: str = DOCS_URL):
        """
        Args:
            os_info: OS detection results for the disk
            catalog: Supported OS catalog; the packaged catalog is loaded on
                first use when omitted
            release_factory: Canonicalizes (distro, major, minor, arch) into a
                release exposing ``as_gcloud_arg()``
            windows_translator: Maps NT (major, minor) to marketing versions
            docs_url: Link shown when a system is unsupported or undetermined
        """
        self.os_info = os_info
        self._catalog = catalog
        self.release_factory = release_factory
        self.windows_translator = windows_translator
        self.docs_url = docs_url

    @classmethod
    def from_config(cls, os_info: OSInfo, config: Config) -> 'OSVersionCheck':
        """
        Build the check with the catalog and docs URL from a loaded config.

        Args:
            os_info: OS detection results for the disk
            config: Loaded configuration

        Returns:
            OSVersionCheck instance

        Raises:
            CatalogError: If the configured catalog cannot be loaded
        """
        catalog = SupportedOSCatalog(config.catalog.path, config.catalog.extra_osids)
        return cls(os_info, catalog=catalog, docs_url=config.precheck.docs_url)

    @property
    def catalog(self) -> SupportedOSCatalog:
        """Supported OS catalog, loading the packaged one on first use."""
        if self._catalog is None:
            self._catalog = SupportedOSCatalog()
        return self._catalog

    def get_name(self) -> str:
        """Get the name of the precheck; this is shown to the user."""
        return self.NAME

    def run(self) -> Report:
        """
        Check whether the detected OS is supported for import.

        An OS that cannot be determined skips the report; an OS that is
        determined but not in the catalog fails it. Neither raises.

        Returns:
            Report named "OS Version Check"

        Raises:
            CatalogError: If the default catalog cannot be loaded
        """
        report = Report(name=self.get_name())

        major, minor = split_os_version(self.os_info.version)
        osid = self.create_os_id(major, minor, report)
        if not osid:
            report.info("Unable to determine whether your system is supported for import. "
                        f"For supported versions, see {self.docs_url}")
            report.skip()
            return report

        matched = self._find_supported_variant(osid)
        if matched is None:
            logger.debug(f"Neither {osid} nor its license variants are supported")
            report.fatal(f"{osid} is not supported for import. For supported versions, see {self.docs_url}")
            return report

        logger.debug(f"{osid} is supported as {matched}")
        if self.os_info.family is OSFamily.WINDOWS:
            # The same NT version is either Desktop or Server, so the OS
            # identifier could be misleading.
            report.info(f"Detected Windows version number: NT {self.os_info.version}")
        else:
            report.info(f"Detected system: {osid}")
        return report

    def _find_supported_variant(self, osid: str) -> Optional[str]:
        """Return the first supported license variant of osid, or None."""
        catalog = self.catalog
        for suffix in LICENSE_SUFFIXES:
            if catalog.is_supported(osid + suffix):
                return osid + suffix
        return None

    def create_os_id(self, major: str, minor: str, report: Report) -> str:
        """
        Create the OS identifier used by the import tool's ``--os`` flag.

        Args:
            major: Major version from the detected version string
            minor: Minor version from the detected version string
            report: Report receiving informational messages

        Returns:
            OS identifier, or an empty string when it cannot be determined
        """
        family = self.os_info.family
        if family is OSFamily.UNKNOWN:
            report.info("Unable to determine OS.")
            return ""
        elif family is OSFamily.GENERIC_LINUX:
            # The detector reports "linux" when no specific distro matched.
            report.info("Detected generic Linux system.")
            return ""
        elif family is OSFamily.WINDOWS:
            report.info("Detected Windows system.")
            major, minor = self._translate_windows_version(major, minor)
        elif family is OSFamily.DISTRO:
            pass
        else:
            raise PrecheckError(f"Unhandled OS family: {family}")

        try:
            release = self.release_factory(self.os_info.short_name, major, minor, self.os_info.architecture)
        except DistroError as e:
            logger.debug(f"Unable to canonicalize {self.os_info}: {e}")
            report.info(str(e))
            return ""

        osid = release.as_gcloud_arg()
        if osid:
            return osid

        # Fall back to "<os>-<version>" when the release has no identifier.
        short_name, version = self.os_info.short_name, self.os_info.version
        if short_name != LINUX and short_name and version:
            return f"{short_name}-{version}"
        return ""

    def _translate_windows_version(self, major: str, minor: str) -> Tuple[str, str]:
        # Detection reports NT versions; the distro package expects marketing versions.
        try:
            return self.windows_translator(major, minor)
        except WindowsVersionError as e:
            logger.debug(f"Keeping NT version {major}.{minor}: {e}")
            return major, minor
