"""
Parser result types.

Every parser returns either ``Recognized`` (its dialect applies; carries the
parsed graph plus any tolerated anomalies) or ``NotApplicable`` (the text is
not in its dialect, so the caller should try the next parser). Neither case
raises.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Union

EdgeTriple = Tuple[str, str, str]


@dataclass
class Diagnostic:
    """A recoverable anomaly noticed while parsing."""
    line_no: int
    message: str
    text: str = ""

    def __str__(self) -> str:
        return f"line {self.line_no}: {self.message}"


@dataclass
class SimpleGraph:
    """Chain form: raw labels in first-seen order, edges between labels."""
    nodes: List[str] = field(default_factory=list)
    edges: List[EdgeTriple] = field(default_factory=list)


@dataclass
class DslNode:
    token: str
    label: str


@dataclass
class DslGraph:
    """DSL form: nodes keyed by their literal digit token, edges between tokens."""
    nodes: List[DslNode] = field(default_factory=list)
    edges: List[EdgeTriple] = field(default_factory=list)


ParsedGraph = Union[SimpleGraph, DslGraph]


@dataclass
class Recognized:
    graph: ParsedGraph
    diagnostics: List[Diagnostic] = field(default_factory=list)
    dialect: str = ""


@dataclass
class NotApplicable:
    reason: str = ""


ParseResult = Union[Recognized, NotApplicable]
