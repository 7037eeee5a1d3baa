"""
Core data models for the image import prechecks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .exceptions import ReportStateError


class ReportResult(Enum):
    """Outcome of a single precheck."""
    PASSED = "passed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class Report:
    """
    Outcome of one precheck run.

    Informational messages are append-only and keep their order. A report ends
    in at most one terminal state, either skipped or failed; a report that never
    reaches one is considered passed.
    """
    name: str
    infos: List[str] = field(default_factory=list)
    fatal_message: Optional[str] = None
    result: ReportResult = ReportResult.PASSED

    def info(self, message: str) -> None:
        """Append an informational message."""
        self.infos.append(message)

    def fatal(self, message: str) -> None:
        """Record the fatal message and mark the report as failed."""
        self._check_not_terminal(ReportResult.FAILED)
        self.fatal_message = message
        self.result = ReportResult.FAILED

    def skip(self) -> None:
        """Mark the report as skipped."""
        self._check_not_terminal(ReportResult.SKIPPED)
        self.result = ReportResult.SKIPPED

    @property
    def passed(self) -> bool:
        return self.result == ReportResult.PASSED

    def _check_not_terminal(self, requested: ReportResult) -> None:
        if self.result != ReportResult.PASSED:
            raise ReportStateError(
                f"Report '{self.name}' is already {self.result.value}; cannot mark it {requested.value}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "result": self.result.value,
            "infos": list(self.infos),
            "fatal": self.fatal_message,
        }
