"""
JSON report generator for precheck results.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .base import ReportGenerator, summarize
from .. import get_version
from ..models import Report


class JSONReporter(ReportGenerator):
    """Structured JSON output of precheck reports."""

    def __init__(self, include_metadata: bool = True, pretty_print: bool = True):
        """
        Initialize JSON reporter.

        Args:
            include_metadata: Whether to include metadata like timestamps
            pretty_print: Whether to format JSON with indentation
        """
        self.include_metadata = include_metadata
        self.pretty_print = pretty_print

    def generate_report(self, reports: List[Report], output_path: Optional[str] = None) -> str:
        report_data = self.get_structured_data(reports)

        if self.pretty_print:
            json_content = json.dumps(report_data, indent=2, ensure_ascii=False)
        else:
            json_content = json.dumps(report_data, ensure_ascii=False)

        if output_path:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(json_content)

        return json_content

    def get_format_name(self) -> str:
        return "json"

    def get_structured_data(self, reports: List[Report]) -> Dict[str, Any]:
        data = {
            "summary": summarize(reports),
            "checks": [r.to_dict() for r in reports],
        }
        if self.include_metadata:
            data["metadata"] = self._build_metadata()
        return data

    def _build_metadata(self) -> Dict[str, Any]:
        return {
            "generated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "generator": "Image Import Precheck",
            "version": get_version(),
            "report_format": self.get_format_name(),
        }
