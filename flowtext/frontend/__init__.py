"""
flowtext frontend: text parsers and the graph builder.

- DslParser: numbered definitions plus connection lines
- ChainParser: ``A -> B -> C`` shorthand
- GraphBuilder: resolves parser output into a FlowChart
"""

from typing import Optional

from flowtext.core.ir import FlowChart
from flowtext.core.registry import IdentityRegistry

from .builder import GraphBuilder, GridLayout
from .chain import ChainParser
from .dsl import DslParser
from .results import (
    Diagnostic,
    DslGraph,
    DslNode,
    NotApplicable,
    ParseResult,
    Recognized,
    SimpleGraph,
)

PARSERS = (DslParser(), ChainParser())


def parse_text(text: str) -> ParseResult:
    """Try each dialect in turn (DSL first) and return the first recognized result."""
    if not text or not text.strip():
        return NotApplicable("empty input")
    reasons = []
    for parser in PARSERS:
        result = parser.parse(text)
        if isinstance(result, Recognized):
            return result
        reasons.append(f"{parser.dialect}: {result.reason}")
    return NotApplicable("; ".join(reasons))


def build_from_text(
    text: str,
    registry: Optional[IdentityRegistry] = None,
    layout: Optional[GridLayout] = None,
    name: str = "FlowChart",
) -> FlowChart:
    """Parse ``text`` and build a chart. Unrecognized text gives an empty chart."""
    if registry is None:
        registry = IdentityRegistry()
    return GraphBuilder(registry, layout=layout, name=name).build(parse_text(text))


__all__ = [
    "ChainParser",
    "DslParser",
    "GraphBuilder",
    "GridLayout",
    "Diagnostic",
    "DslGraph",
    "DslNode",
    "NotApplicable",
    "ParseResult",
    "Recognized",
    "SimpleGraph",
    "parse_text",
    "build_from_text",
]
