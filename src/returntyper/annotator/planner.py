"""Placement of return-type annotations."""

import logging
from enum import Enum

from returntyper.models import TextToInsert
from returntyper.syntax.nodes import NodeKind, SyntaxNode
from returntyper.syntax.source import SourceFile

logger = logging.getLogger(__name__)

ANNOTATION_SEPARATOR = ": "


class PlannerState(Enum):
    """States of the scan over a function's direct children."""

    SEEKING_PAREN = "seeking_paren"
    SEEKING_COLON = "seeking_colon"
    DONE_NO_INSERT = "done_no_insert"
    DONE_INSERT = "done_insert"


def scan_children(node: SyntaxNode) -> tuple[PlannerState, int | None]:
    """Scan a function's direct children for its parameter list and return annotation.

    Only direct children are considered: colons inside parameter types or
    nested functions belong to deeper nodes and never count.

    Returns:
        Final state and the end offset of the last closing parenthesis seen
    """
    state = PlannerState.SEEKING_PAREN
    paren_end: int | None = None

    for child in node.children:
        if child.kind is NodeKind.CLOSE_PAREN_TOKEN:
            paren_end = child.end
            state = PlannerState.SEEKING_COLON
        elif child.kind is NodeKind.COLON_TOKEN and state is PlannerState.SEEKING_COLON:
            return PlannerState.DONE_NO_INSERT, paren_end

    if state is PlannerState.SEEKING_COLON:
        return PlannerState.DONE_INSERT, paren_end
    return PlannerState.DONE_NO_INSERT, paren_end


def plan_insertion(source_file: SourceFile, node: SyntaxNode, inferred_type: str) -> TextToInsert | None:
    """Compute where and what to insert to annotate a function's return type.

    Args:
        source_file: File the node belongs to
        node: Function-like node
        inferred_type: Rendered return type

    Returns:
        The insertion right after the parameter list's closing parenthesis, or
        None when the function is already annotated or has no parenthesis
    """
    state, paren_end = scan_children(node)

    if paren_end is None:
        # e.g. `x => x`: nothing to anchor an annotation on
        logger.debug(f"No closing parenthesis in {node!r}, skipping annotation")
        return None
    if state is PlannerState.DONE_NO_INSERT:
        return None

    return TextToInsert(
        position=source_file.position_at(paren_end),
        text=f"{ANNOTATION_SEPARATOR}{inferred_type}",
    )
