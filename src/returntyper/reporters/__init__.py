"""Reporters for analysis results."""

from returntyper.reporters.base import BaseReporter
from returntyper.reporters.stdout import StdoutReporter

__all__ = ["BaseReporter", "StdoutReporter"]
