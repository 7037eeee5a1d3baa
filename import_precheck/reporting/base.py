"""
Abstract base classes for report generation.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..models import Report, ReportResult


class ReportGenerator(ABC):
    """Abstract base class for report generators."""

    @abstractmethod
    def generate_report(self, reports: List[Report], output_path: Optional[str] = None) -> str:
        """
        Generate output from precheck reports.

        Args:
            reports: Reports in the order the checks ran
            output_path: Optional path to write report to file

        Returns:
            Report content as string
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """
        Get the name of the report format.

        Returns:
            String identifier for the report format (e.g., "json", "text")
        """
        pass


def summarize(reports: List[Report]) -> Dict[str, int]:
    """Count reports by result."""
    summary = {"total": len(reports)}
    for result in ReportResult:
        summary[result.value] = sum(1 for r in reports if r.result == result)
    return summary
