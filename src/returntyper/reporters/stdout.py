"""Stdout reporter for console output."""

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from returntyper.config import OutputFormat
from returntyper.models import FileReport
from returntyper.reporters.base import BaseReporter


class StdoutReporter(BaseReporter):
    """Reporter that outputs file reports to stdout."""

    def __init__(
        self,
        format: OutputFormat = "table",
        console: Console | None = None,
    ) -> None:
        """Initialize stdout reporter.

        Args:
            format: Output format (table or json).
            console: Rich console for output. Creates new one if not provided.
        """
        self.format = format
        self.console = console or Console()

    def report(self, result: FileReport) -> None:
        """Output a file report to the console.

        Args:
            result: The file report to output.
        """
        if self.format == "json":
            self.console.print_json(json.dumps(result.to_json_dict()))
        else:
            self.console.print(self._build_table(result))
            for failure in result.failures:
                self.console.print(
                    f"[yellow]unresolved[/yellow] {failure.kind} at "
                    f"{failure.position.line}:{failure.position.character}: {escape(failure.message)}",
                    markup=True,
                    highlight=False,
                )

    def _build_table(self, result: FileReport) -> Table:
        table = Table(title=escape(result.path), title_justify="left")
        table.add_column("Function")
        table.add_column("Return type")
        table.add_column("Insert at", justify="right")
        table.add_column("Text")

        for function in result.functions:
            insertion = function.text_to_insert
            if insertion is None:
                where, text = "-", "[dim]annotated or not placeable[/dim]"
            else:
                where = f"{insertion.position.line}:{insertion.position.character}"
                text = escape(insertion.text)
            table.add_row(
                escape(function.name) if function.name else "[dim]<anonymous>[/dim]",
                escape(function.inferred_return_type),
                where,
                text,
            )
        return table
