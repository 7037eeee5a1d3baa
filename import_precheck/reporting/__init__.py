"""
Reporting Module

Contains report generators for precheck results (JSON, text).
"""

from .base import ReportGenerator
from .json_reporter import JSONReporter
from .text_reporter import TextReporter

__all__ = ['ReportGenerator', 'JSONReporter', 'TextReporter']
