"""
Document context shared by the text editor and the rendering surface.

A FlowDocument owns the identity registry and the current chart. The
renderer draws ``render_payload()`` and reports user edits back through the
event methods; ``export_text()`` always reflects those edits.

Example:
    doc = FlowDocument("Checkout")
    doc.build_from_text("1.Cart\\n2.Pay\\n1->2")
    doc.node_label_changed("n_2", "Pay now")
    doc.export_text()   # "1.Cart\\n2.Pay now\\n1->2"
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from flowtext.backend.text import TextExporter
from flowtext.core.identity import dsl_id, dsl_token
from flowtext.core.ir import FlowChart, Node, Edge
from flowtext.core.registry import IdentityRegistry
from flowtext.core.serialization import JsonSerializer
from flowtext.frontend import parse_text
from flowtext.frontend.builder import GraphBuilder, GridLayout
from flowtext.frontend.results import ParseResult
from flowtext.frontend.syntax import normalize_edge_label

logger = logging.getLogger(__name__)

# Asks the user for replacement text; returns None when cancelled
TextEditRequest = Callable[[str], Optional[str]]


class FlowDocument:
    """One editable flow: its text, its graph, and the registry tying them."""

    def __init__(self, name: str = "Untitled", layout: Optional[GridLayout] = None):
        self.name = name
        self.registry = IdentityRegistry()
        self.builder = GraphBuilder(self.registry, layout=layout, name=name)
        self.chart = FlowChart(name)
        self.last_result: Optional[ParseResult] = None

    @property
    def layout(self) -> GridLayout:
        return self.builder.layout

    def build_from_text(self, text: str) -> FlowChart:
        """Replace the whole graph with one built from ``text``."""
        self.last_result = parse_text(text)
        self.chart = self.builder.build(self.last_result)
        return self.chart

    def export_text(self) -> str:
        return TextExporter.to_text(self.chart, self.registry)

    def export_dsl(self) -> str:
        return TextExporter.to_dsl(self.chart, self.registry)

    def export_chain(self) -> str:
        return TextExporter.to_chain(self.chart, self.registry)

    def render_payload(self) -> Dict[str, Any]:
        return JsonSerializer.to_dict(self.chart)

    # Accessors used by the rendering surface

    def node_ids(self) -> List[str]:
        return list(self.chart.nodes)

    def edge_ids(self) -> List[str]:
        return [edge.id for edge in self.chart.edges]

    def edge_endpoints(self, edge_id: str) -> Optional[Tuple[str, str]]:
        edge = self.chart.get_edge(edge_id)
        if edge is None:
            return None
        return edge.source_id, edge.target_id

    # Edit events

    def node_label_changed(self, node_id: str, text: str) -> bool:
        node = self.chart.get_node(node_id)
        if node is None:
            logger.warning("Label change for unknown node %s ignored", node_id)
            return False
        node.label = text
        self.registry.assign(node_id, text)
        return True

    def edge_label_changed(self, edge_id: str, text: str) -> bool:
        edge = self.chart.get_edge(edge_id)
        if edge is None:
            logger.warning("Label change for unknown edge %s ignored", edge_id)
            return False
        edge.label = normalize_edge_label(text)
        return True

    def edit_node_label(self, node_id: str, request_text_edit: TextEditRequest) -> bool:
        """Ask for a new node label and apply it. Returns False if cancelled."""
        node = self.chart.get_node(node_id)
        if node is None:
            logger.warning("Edit requested for unknown node %s", node_id)
            return False
        new_text = request_text_edit(self.registry.label_for(node_id))
        if new_text is None:
            return False
        return self.node_label_changed(node_id, new_text)

    def edit_edge_label(self, edge_id: str, request_text_edit: TextEditRequest) -> bool:
        edge = self.chart.get_edge(edge_id)
        if edge is None:
            logger.warning("Edit requested for unknown edge %s", edge_id)
            return False
        new_text = request_text_edit(edge.label)
        if new_text is None:
            return False
        return self.edge_label_changed(edge_id, new_text)

    # Structural edits

    def add_node(self, label: str) -> Node:
        """
        Add a node created on the canvas.

        A DSL-shaped document gets the next free numeric token so it keeps
        exporting as DSL. Otherwise the label's simple id is used, and an
        existing node with that label is returned instead of a duplicate.
        """
        if TextExporter.detect_form(self.chart) == TextExporter.DSL:
            tokens = [int(dsl_token(node_id)) for node_id in self.chart.nodes]
            node_id = dsl_id(str(max(tokens, default=0) + 1))
            self.registry.assign(node_id, label)
        else:
            node_id = self.registry.resolve(label)
            existing = self.chart.get_node(node_id)
            if existing is not None:
                return existing
            label = label.strip()

        node = self.chart.add_node(Node(node_id, label=label))
        self.layout.place(node, len(self.chart.nodes) - 1, len(self.chart.nodes))
        return node

    def connect(self, source_id: str, target_id: str, label: str = "") -> Edge:
        return self.chart.add_edge(Edge(source_id, target_id, label=normalize_edge_label(label)))
