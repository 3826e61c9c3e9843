"""Command-line interface for returntyper."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from returntyper import __version__
from returntyper.annotator.pipeline import ReturnTypeAnnotator
from returntyper.config import get_settings
from returntyper.errors import ReturnTyperError, TypeResolutionError
from returntyper.oracle.table import TableOracle, TypeTable
from returntyper.reporters.stdout import StdoutReporter
from returntyper.syntax.treesitter import TypeScriptTreeProvider

app = typer.Typer(
    name="returntyper",
    help="Plan explicit return-type annotations for TypeScript functions",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"returntyper version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """returntyper - plan explicit return-type annotations for TypeScript functions."""
    pass


@app.command()
def scan(
    files: Annotated[
        list[Path],
        typer.Argument(
            help="TypeScript files to analyze (.ts, .mts, .cts, .tsx)",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    types: Annotated[
        Path | None,
        typer.Option(
            "--types",
            "-t",
            help="YAML type table with the inferred return types (overrides config)",
        ),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option(
            "--output",
            "-o",
            help="Output format: table or json",
        ),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--lenient",
            help="Abort on the first function without a recorded type (overrides config)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Enable debug logging",
        ),
    ] = False,
) -> None:
    """Report the return-type annotation each function is missing.

    Source files are never modified.

    Examples:
        returntyper scan src/app.ts --types types.yaml
        returntyper scan src/app.ts src/view.tsx --types types.yaml --output json
        returntyper scan src/app.ts --types types.yaml --strict
    """
    settings = get_settings().model_copy()

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )

    # CLI > env > yaml > defaults
    if output:
        if output not in ("table", "json"):
            err_console.print(f"[red]Error:[/red] Unknown output format '{output}'")
            raise typer.Exit(1)
        settings.output_format = output  # type: ignore
    if strict is not None:
        settings.continue_on_error = not strict

    table_path = types or settings.type_table
    if table_path is None:
        err_console.print(
            "[red]Error:[/red] No type table given. Pass --types or set "
            "RETURNTYPER_TYPE_TABLE / type_table in returntyper.yaml"
        )
        raise typer.Exit(1)

    provider = TypeScriptTreeProvider()
    unsupported = [f for f in files if not provider.supports(f)]
    if unsupported:
        err_console.print(
            "[red]Error:[/red] Unsupported file type: " + ", ".join(str(f) for f in unsupported)
        )
        raise typer.Exit(1)

    annotator = ReturnTypeAnnotator(settings)
    reporter = StdoutReporter(format=settings.output_format, console=console)

    try:
        table = TypeTable.from_yaml(table_path)
        for file_path in files:
            source_file = provider.parse_file(file_path)
            oracle = TableOracle(source_file, table)
            reporter.report(annotator.analyze(source_file, oracle))
    except TypeResolutionError as e:
        err_console.print(f"[red]Unresolved type:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)
    except ReturnTyperError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)
    except UnicodeDecodeError as e:
        err_console.print(f"[red]Error:[/red] Source file is not UTF-8: {escape(str(e))}", highlight=False)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
