import sys
import os

# Ensure flowtext is in path
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from flowtext import FlowDocument, MermaidExporter, Recognized

HERE = os.path.dirname(__file__)


def show(path):
    with open(path, encoding="utf-8") as f:
        text = f.read()

    doc = FlowDocument(os.path.basename(path))
    chart = doc.build_from_text(text)
    result = doc.last_result
    dialect = result.dialect if isinstance(result, Recognized) else "none"
    print(f"{doc.name}: {dialect}, {len(chart.nodes)} nodes, {len(chart.edges)} edges")

    for node in chart.nodes.values():
        print(f"  {node.id:<24} ({node.x:>5.0f},{node.y:>5.0f})  {node.label!r}")
    return doc


def main():
    doc = show(os.path.join(HERE, "order.flow"))

    # Simulate edits coming back from the canvas
    doc.node_label_changed("n_4", "Refund and apologise")
    doc.edit_edge_label("e3", lambda current: "sold out")
    doc.connect("n_4", "n_1", label="reorder")

    print("\nExported after edits:")
    print(doc.export_text())

    print("\nMermaid:")
    print(MermaidExporter.to_mermaid(doc.chart, direction="LR"))

    chain_doc = show(os.path.join(HERE, "support.chain"))
    print("\nShorthand re-export:")
    print(chain_doc.export_text())


if __name__ == "__main__":
    main()
