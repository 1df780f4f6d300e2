"""Core data structures for flowtext graphs."""

from .ir import Node, Edge, FlowChart
from .identity import DSL_PREFIX, SIMPLE_PREFIX, dsl_id, simple_id, is_dsl_id, label_from_id
from .registry import IdentityRegistry
from .serialization import JsonSerializer

__all__ = [
    "Node",
    "Edge",
    "FlowChart",
    "DSL_PREFIX",
    "SIMPLE_PREFIX",
    "dsl_id",
    "simple_id",
    "is_dsl_id",
    "label_from_id",
    "IdentityRegistry",
    "JsonSerializer",
]
