from typing import Dict

from flowtext.core.ir import FlowChart


class MermaidExporter:
    """Exports a FlowChart to Mermaid.js syntax."""

    @staticmethod
    def _sanitize(text: str) -> str:
        """Escape special characters for Mermaid syntax."""
        text = text.replace('"', '#quot;').replace("(", "#40;").replace(")", "#41;")
        text = text.replace("|", "#124;")
        return text.replace("\n", "<br/>")

    @staticmethod
    def _aliases(flowchart: FlowChart) -> Dict[str, str]:
        """
        Short Mermaid-safe ids in insertion order.

        Simple ids are base64 and may contain '-', which Mermaid reads as
        part of an arrow.
        """
        return {node_id: f"N{index}" for index, node_id in enumerate(flowchart.nodes)}

    @staticmethod
    def to_mermaid(flowchart: FlowChart, direction: str = "TD") -> str:
        """
        Convert flowchart to Mermaid diagram syntax.

        Args:
            flowchart: The flowchart to convert
            direction: Graph direction (TD, LR, etc.)
        """
        lines = [f"graph {direction}"]
        aliases = MermaidExporter._aliases(flowchart)

        for node in flowchart.nodes.values():
            label = MermaidExporter._sanitize(node.label)
            lines.append(f'    {aliases[node.id]}["{label}"]')

        for edge in flowchart.edges:
            src, tgt = aliases[edge.source_id], aliases[edge.target_id]
            if edge.label:
                clean_label = MermaidExporter._sanitize(edge.label)
                lines.append(f"    {src} -- {clean_label} --> {tgt}")
            else:
                lines.append(f"    {src} --> {tgt}")

        return "\n".join(lines)
