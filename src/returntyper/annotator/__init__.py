"""Discovery, signature resolution and annotation planning."""

from returntyper.annotator.pipeline import (
    ReturnTypeAnnotator,
    enrich_function_node,
    enrich_function_nodes,
)
from returntyper.annotator.planner import PlannerState, plan_insertion
from returntyper.annotator.resolver import ResolvedSignature, resolve_signatures
from returntyper.annotator.walker import discover_function_nodes

__all__ = [
    "PlannerState",
    "ResolvedSignature",
    "ReturnTypeAnnotator",
    "discover_function_nodes",
    "enrich_function_node",
    "enrich_function_nodes",
    "plan_insertion",
    "resolve_signatures",
]
