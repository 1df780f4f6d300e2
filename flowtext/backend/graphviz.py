import graphviz
from flowtext.core.ir import FlowChart


class GraphvizExporter:
    """Exports a FlowChart to Graphviz/Dot format."""

    # Graphviz positions are in points; the grid layout is in pixels
    _POINTS_PER_PIXEL = 72.0 / 96.0

    @staticmethod
    def _pos(node) -> str:
        """Pinned position, with y flipped since Graphviz grows upwards."""
        scale = GraphvizExporter._POINTS_PER_PIXEL
        return f"{node.x * scale:g},{-node.y * scale:g}!"

    @staticmethod
    def to_digraph(flowchart: FlowChart, rankdir: str = "TB", pin_positions: bool = False) -> graphviz.Digraph:
        """
        Converts FlowChart to a graphviz.Digraph object.

        Args:
            flowchart: The flowchart to convert
            rankdir: Graphviz rank direction
            pin_positions: If True, pin nodes to their grid layout cells
                (honoured by the neato engine)
        """
        dot = graphviz.Digraph(name=flowchart.name, comment=flowchart.name)
        dot.attr(rankdir=rankdir)

        for node in flowchart.nodes.values():
            attrs = {"shape": "box"}
            if pin_positions:
                attrs["pos"] = GraphvizExporter._pos(node)
            # DOT line break escape for multi-line labels
            dot.node(node.id, label=node.label.replace("\n", "\\n"), **attrs)

        for edge in flowchart.edges:
            dot.edge(edge.source_id, edge.target_id, label=edge.label)

        return dot

    @staticmethod
    def to_dot(flowchart: FlowChart) -> str:
        """Returns the DOT source string for the flowchart."""
        return GraphvizExporter.to_digraph(flowchart).source

