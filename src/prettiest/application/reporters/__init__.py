"""Reporters for lint results.

PlainTextReporter and JSONReporter use stdlib only;
ConsoleReporter renders with rich.
"""

from prettiest.application.reporters._base import BaseReporter
from prettiest.application.reporters.console import ConsoleConfig, ConsoleReporter
from prettiest.application.reporters.json_reporter import JSONReporter
from prettiest.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
