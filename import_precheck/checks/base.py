"""
Abstract base class for prechecks.
"""

from abc import ABC, abstractmethod

from ..models import Report


class Check(ABC):
    """A named validation step run before an image import."""

    @abstractmethod
    def get_name(self) -> str:
        """
        Get the name of the precheck; this is shown to the user.

        Returns:
            Display name of the check
        """
        pass

    @abstractmethod
    def run(self) -> Report:
        """
        Execute the precheck.

        Expected validation outcomes (skipped, failed) are recorded in the
        returned report. Exceptions are reserved for failures that prevent
        the check from running at all.

        Returns:
            Report for this run
        """
        pass
