"""Return-type annotation pipeline: discover, resolve, plan."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from returntyper.annotator.planner import plan_insertion
from returntyper.annotator.resolver import resolve_signatures
from returntyper.annotator.walker import discover_function_nodes
from returntyper.errors import TypeResolutionError
from returntyper.models import FileReport, ResolutionFailure, VisitedFunction
from returntyper.oracle.base import TypeOracle
from returntyper.syntax.nodes import SyntaxNode
from returntyper.syntax.source import SourceFile

if TYPE_CHECKING:
    from returntyper.config import Settings

logger = logging.getLogger(__name__)


def enrich_function_node(
    source_file: SourceFile,
    node: SyntaxNode,
    oracle: TypeOracle,
) -> list[VisitedFunction]:
    """Produce one record per call signature of a function-like node.

    Raises:
        TypeResolutionError: If the oracle cannot type the node
    """
    return [
        VisitedFunction(
            name=resolved.name,
            inferred_return_type=resolved.inferred_return_type,
            text_to_insert=plan_insertion(source_file, node, resolved.inferred_return_type),
        )
        for resolved in resolve_signatures(node, oracle)
    ]


def enrich_function_nodes(
    source_file: SourceFile,
    nodes: list[SyntaxNode],
    oracle: TypeOracle,
) -> list[VisitedFunction]:
    """Enrich several nodes, keeping node order then signature order."""
    results: list[VisitedFunction] = []
    for node in nodes:
        results.extend(enrich_function_node(source_file, node, oracle))
    return results


class ReturnTypeAnnotator:
    """Runs the pipeline over whole files."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the annotator.

        Args:
            settings: Application settings. Uses global settings if not provided.
        """
        from returntyper.config import get_settings

        self.settings = settings or get_settings()

    def analyze(self, source_file: SourceFile, oracle: TypeOracle) -> FileReport:
        """Analyze every function-like node of a file.

        With ``continue_on_error`` set, a node the oracle cannot type is
        recorded as a failure and the remaining nodes are still analyzed.

        Raises:
            TypeResolutionError: If ``continue_on_error`` is off and a node
                cannot be typed
        """
        nodes = discover_function_nodes(source_file.root)
        logger.debug(f"Found {len(nodes)} function-like nodes in {source_file.path}")

        report = FileReport(path=source_file.path)
        for node in nodes:
            try:
                report.functions.extend(enrich_function_node(source_file, node, oracle))
            except TypeResolutionError as e:
                if not self.settings.continue_on_error:
                    raise
                logger.warning(f"Skipping function: {e}")
                report.failures.append(ResolutionFailure(
                    kind=node.kind.value,
                    position=source_file.position_at(node.start),
                    message=str(e),
                ))

        logger.info(
            f"{source_file.path}: {len(report.functions)} signatures, "
            f"{len(report.insertions)} insertions, {len(report.failures)} failures"
        )
        return report
