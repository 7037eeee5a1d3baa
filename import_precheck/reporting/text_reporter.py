"""
Human-readable text report generator for precheck results.
"""

import os
import re
import sys
from typing import List, Optional

from .base import ReportGenerator
from ..models import Report, ReportResult


class TextReporter(ReportGenerator):
    """Console output with one boxed section per precheck."""

    COLORS = {
        'RED': '\033[91m',
        'GREEN': '\033[92m',
        'YELLOW': '\033[93m',
        'RESET': '\033[0m'
    }

    RESULT_COLORS = {
        ReportResult.PASSED: 'GREEN',
        ReportResult.SKIPPED: 'YELLOW',
        ReportResult.FAILED: 'RED',
    }

    _ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')

    def __init__(self, use_colors: Optional[bool] = None):
        """
        Initialize text reporter.

        Args:
            use_colors: Whether to use ANSI color codes. Auto-detects if None.
        """
        if use_colors is None:
            self.use_colors = self._supports_color()
        else:
            self.use_colors = use_colors

    def generate_report(self, reports: List[Report], output_path: Optional[str] = None) -> str:
        text_content = "\n\n".join(self._build_section(r) for r in reports)

        if output_path:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(self._strip_colors(text_content))

        return text_content

    def get_format_name(self) -> str:
        return "text"

    def _build_section(self, report: Report) -> str:
        header = f"{report.name} -- {report.result.name}"
        border = "+" + "-" * (len(header) + 2) + "+"
        colored_header = self._colorize(header, self.RESULT_COLORS[report.result])

        lines = [border, f"| {colored_header} |", border]
        lines.extend(f"  INFO: {message}" for message in report.infos)
        if report.fatal_message:
            lines.append(f"  FATAL: {report.fatal_message}")
        return "\n".join(lines)

    def _supports_color(self) -> bool:
        if os.environ.get('NO_COLOR'):
            return False
        if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
            return False
        term = os.environ.get('TERM', '').lower()
        return 'color' in term or term in ['xterm', 'xterm-256color', 'screen']

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors or color not in self.COLORS:
            return text
        return f"{self.COLORS[color]}{text}{self.COLORS['RESET']}"

    def _strip_colors(self, text: str) -> str:
        return self._ANSI_ESCAPE.sub('', text)
