"""Backend exporters for flowtext graphs."""

from flowtext.backend.graphviz import GraphvizExporter
from flowtext.backend.mermaid import MermaidExporter
from flowtext.backend.text import TextExporter

__all__ = [
    "GraphvizExporter",
    "MermaidExporter",
    "TextExporter",
]
