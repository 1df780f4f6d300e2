"""Resolves parser output into a FlowChart with stable node ids."""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from flowtext.core.identity import dsl_id, label_from_id
from flowtext.core.ir import FlowChart, Node, Edge
from flowtext.core.registry import IdentityRegistry
from flowtext.frontend.results import DslGraph, ParseResult, Recognized, SimpleGraph

logger = logging.getLogger(__name__)


@dataclass
class GridLayout:
    """
    Placeholder row-major grid placement.

    The renderer owns real positioning; this only gives every node a
    deterministic starting cell.
    """
    cell_width: float = 160.0
    cell_height: float = 60.0
    gap_x: float = 60.0
    gap_y: float = 40.0
    origin_x: float = 0.0
    origin_y: float = 0.0

    def columns(self, count: int) -> int:
        return max(1, math.ceil(math.sqrt(count)))

    def cell(self, index: int, count: int) -> Tuple[float, float]:
        cols = self.columns(count)
        row, col = divmod(index, cols)
        x = self.origin_x + col * (self.cell_width + self.gap_x)
        y = self.origin_y + row * (self.cell_height + self.gap_y)
        return x, y

    def place(self, node: Node, index: int, count: int) -> None:
        node.x, node.y = self.cell(index, count)
        node.width = self.cell_width
        node.height = self.cell_height

    def apply(self, chart: FlowChart) -> None:
        count = len(chart.nodes)
        for index, node in enumerate(chart.nodes.values()):
            self.place(node, index, count)


class GraphBuilder:
    """
    Builds a FlowChart from a parse result.

    Each build clears the registry and repopulates it, so building the same
    text twice yields the same ids.

    Example:
        registry = IdentityRegistry()
        chart = GraphBuilder(registry).build(DslParser().parse("1.A\\n1->2"))
    """

    def __init__(self, registry: IdentityRegistry, layout: Optional[GridLayout] = None, name: str = "FlowChart"):
        self.registry = registry
        self.layout = layout or GridLayout()
        self.name = name

    def build(self, result: Optional[ParseResult]) -> FlowChart:
        self.registry.clear()
        chart = FlowChart(self.name)

        pending: List[Tuple[str, str, str]] = []
        if isinstance(result, Recognized):
            chart.metadata["dialect"] = result.dialect
            if isinstance(result.graph, DslGraph):
                pending = self._build_dsl(chart, result.graph)
            elif isinstance(result.graph, SimpleGraph):
                pending = self._build_simple(chart, result.graph)

        self._reconcile(chart, pending)
        for source_id, target_id, label in pending:
            chart.add_edge(Edge(source_id, target_id, label=label))

        self.layout.apply(chart)
        logger.debug("Built %s: %d nodes, %d edges", chart.name, len(chart.nodes), len(chart.edges))
        return chart

    def _build_simple(self, chart: FlowChart, graph: SimpleGraph) -> List[Tuple[str, str, str]]:
        for label in graph.nodes:
            self._ensure_simple_node(chart, label)

        pending = []
        for source, target, label in graph.edges:
            source_id = self._ensure_simple_node(chart, source)
            target_id = self._ensure_simple_node(chart, target)
            pending.append((source_id, target_id, label))
        return pending

    def _ensure_simple_node(self, chart: FlowChart, label: str) -> str:
        node_id = self.registry.resolve(label)
        if node_id not in chart.nodes:
            chart.add_node(Node(node_id, label=label.strip()))
        return node_id

    def _build_dsl(self, chart: FlowChart, graph: DslGraph) -> List[Tuple[str, str, str]]:
        for dsl_node in graph.nodes:
            node_id = dsl_id(dsl_node.token)
            chart.add_node(Node(node_id, label=dsl_node.label))
            self.registry.assign(node_id, dsl_node.label)

        pending = [(dsl_id(src), dsl_id(tgt), label) for src, tgt, label in graph.edges]

        # Undeclared tokens referenced by edges become placeholder nodes
        referenced = []
        for src, tgt, _ in graph.edges:
            for token in (src, tgt):
                if token not in referenced:
                    referenced.append(token)
        for token in referenced:
            node_id = dsl_id(token)
            if node_id not in chart.nodes:
                logger.debug("Materializing undeclared node %s", token)
                chart.add_node(Node(node_id, label=token, metadata={"placeholder": True}))
                self.registry.assign(node_id, token)
        return pending

    def _reconcile(self, chart: FlowChart, pending: List[Tuple[str, str, str]]) -> None:
        """Guarantee every edge endpoint exists, whatever the per-form logic did."""
        for source_id, target_id, _ in pending:
            for node_id in (source_id, target_id):
                if node_id in chart.nodes:
                    continue
                label = label_from_id(node_id)
                logger.debug("Reconciling missing endpoint %s as %r", node_id, label)
                chart.add_node(Node(node_id, label=label, metadata={"placeholder": True}))
                self.registry.assign(node_id, label)
