import logging

from flowtext.core.identity import dsl_token, is_dsl_id
from flowtext.core.ir import FlowChart
from flowtext.core.registry import IdentityRegistry
from flowtext.frontend.syntax import normalize_edge_label

logger = logging.getLogger(__name__)


class TextExporter:
    """
    Regenerates flow text from a chart.

    The form is chosen from node ids alone: if every id is a DSL id
    (``n_<digits>``) the DSL form is written, otherwise the arrow-chain
    shorthand. Labels are read from the registry, so edits applied there
    show up in the output; an id the registry does not know exports as an
    empty label. Edge labels are flattened to one line without pipes.
    """

    DSL = "dsl"
    CHAIN = "chain"

    @staticmethod
    def detect_form(flowchart: FlowChart) -> str:
        if all(is_dsl_id(node_id) for node_id in flowchart.nodes):
            return TextExporter.DSL
        return TextExporter.CHAIN

    @staticmethod
    def to_text(flowchart: FlowChart, registry: IdentityRegistry) -> str:
        form = TextExporter.detect_form(flowchart)
        logger.debug("Exporting %s as %s", flowchart.name, form)
        if form == TextExporter.DSL:
            return TextExporter.to_dsl(flowchart, registry)
        return TextExporter.to_chain(flowchart, registry)

    @staticmethod
    def to_dsl(flowchart: FlowChart, registry: IdentityRegistry) -> str:
        """Node definitions first, then one connection per edge."""
        lines = []
        for node_id in flowchart.nodes:
            token = dsl_token(node_id) or node_id
            lines.append(f"{token}.{registry.label_for(node_id)}")

        for edge in flowchart.edges:
            src = dsl_token(edge.source_id) or edge.source_id
            tgt = dsl_token(edge.target_id) or edge.target_id
            edge_label = normalize_edge_label(edge.label)
            if edge_label:
                lines.append(f"{src}->|{edge_label}|{tgt}")
            else:
                lines.append(f"{src}->{tgt}")

        return "\n".join(lines)

    @staticmethod
    def to_chain(flowchart: FlowChart, registry: IdentityRegistry) -> str:
        """
        One ``src -> tgt`` line per edge.

        Branching cannot be written as a single chain, so fan-out becomes
        several lines. Parallel edges are kept as separate lines. Nodes with
        no edges follow as bare labels.
        """
        def label(node_id: str) -> str:
            # Shorthand is line based; multi-line labels are flattened
            return " ".join(registry.label_for(node_id).split("\n"))

        lines = []
        for edge in flowchart.edges:
            edge_label = normalize_edge_label(edge.label)
            if edge_label:
                lines.append(f"{label(edge.source_id)} -> |{edge_label}| {label(edge.target_id)}")
            else:
                lines.append(f"{label(edge.source_id)} -> {label(edge.target_id)}")

        connected = flowchart.connected_node_ids()
        for node_id in flowchart.nodes:
            if node_id not in connected:
                lines.append(label(node_id))

        return "\n".join(lines)
