"""
OS detection data consumed by the prechecks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from ..exceptions import OSInfoError

# Short names emitted by the OS detector.
LINUX = "linux"  # no specific distro could be identified
WINDOWS = "windows"


class OSFamily(Enum):
    """Families that the OS version check treats differently."""
    UNKNOWN = "unknown"
    GENERIC_LINUX = "generic_linux"
    WINDOWS = "windows"
    DISTRO = "distro"


def classify_short_name(short_name: str) -> OSFamily:
    """Map a detector short name onto its OS family."""
    if not short_name:
        return OSFamily.UNKNOWN
    if short_name == LINUX:
        return OSFamily.GENERIC_LINUX
    if short_name == WINDOWS:
        return OSFamily.WINDOWS
    return OSFamily.DISTRO


@dataclass(frozen=True)
class OSInfo:
    """Operating system detected on a disk."""
    short_name: str = ""
    version: str = ""
    architecture: str = ""

    @property
    def family(self) -> OSFamily:
        return classify_short_name(self.short_name)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OSInfo':
        """
        Build OSInfo from detector output.

        Both snake_case keys and the detector's CamelCase keys are accepted.
        Missing keys become empty strings.

        Args:
            data: Mapping produced by the OS detector

        Returns:
            OSInfo instance

        Raises:
            OSInfoError: If data is not a mapping or a value is not a string
        """
        if not isinstance(data, dict):
            raise OSInfoError(f"OS info must be a mapping, got {type(data).__name__}")

        values = {}
        for attr, camel in (("short_name", "ShortName"), ("version", "Version"),
                            ("architecture", "Architecture")):
            value = data.get(attr, data.get(camel, ""))
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise OSInfoError(f"OS info field '{attr}' must be a string, got {type(value).__name__}")
            values[attr] = value

        return cls(**values)
