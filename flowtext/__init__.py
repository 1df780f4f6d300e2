"""
flowtext - translate compact flow text to a graph model and back.

Main APIs:
- FlowDocument: owns a graph, its identity registry and edit events
- parse_text / build_from_text: dialect detection and graph building
- DslParser, ChainParser: the two text dialects

Backends:
- TextExporter: DSL or chain shorthand, chosen from node ids
- MermaidExporter: Mermaid.js diagram syntax
- GraphvizExporter: Graphviz DOT format
"""

from flowtext.core.ir import FlowChart, Node, Edge
from flowtext.core.registry import IdentityRegistry
from flowtext.core.serialization import JsonSerializer
from flowtext.frontend import (
    ChainParser,
    DslParser,
    GraphBuilder,
    GridLayout,
    NotApplicable,
    Recognized,
    build_from_text,
    parse_text,
)
from flowtext.backend import TextExporter, MermaidExporter, GraphvizExporter
from flowtext.session import FlowDocument

__all__ = [
    # Core IR
    "FlowChart",
    "Node",
    "Edge",
    "IdentityRegistry",
    # Serialization
    "JsonSerializer",
    # Frontend
    "ChainParser",
    "DslParser",
    "GraphBuilder",
    "GridLayout",
    "NotApplicable",
    "Recognized",
    "build_from_text",
    "parse_text",
    # Backends
    "TextExporter",
    "MermaidExporter",
    "GraphvizExporter",
    # Session
    "FlowDocument",
]
