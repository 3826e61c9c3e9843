"""Base reporter interface for analysis output."""

from abc import ABC, abstractmethod

from returntyper.models import FileReport


class BaseReporter(ABC):
    """Abstract base class for report output."""

    @abstractmethod
    def report(self, result: FileReport) -> None:
        """Output a file report.

        Args:
            result: The file report to output.
        """
        pass
