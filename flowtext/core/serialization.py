"""
JSON serialization for FlowChart objects.

The serialized format doubles as the payload handed to the rendering
surface: nodes carry their grid geometry, edges carry their ids, and a
'graph' block holds precomputed incoming/outgoing edge lookups.
"""

import json
from typing import Dict, Any

from flowtext.core.ir import FlowChart, Node, Edge


class JsonSerializer:
    """
    Serializes and deserializes FlowChart objects to/from JSON.

    The 'graph' field (incomingEdges, outgoingEdges) is derived data for the
    renderer and is ignored by from_dict, since it can be recomputed from
    the edges list.
    """

    @staticmethod
    def to_dict(flowchart: FlowChart) -> Dict[str, Any]:
        nodes_data = []
        for node in flowchart.nodes.values():
            nodes_data.append({
                "id": node.id,
                "label": node.label,
                "x": node.x,
                "y": node.y,
                "width": node.width,
                "height": node.height,
                "metadata": node.metadata
            })

        edges_data = []
        incoming_edges: Dict[str, list] = {}
        outgoing_edges: Dict[str, list] = {}

        for edge in flowchart.edges:
            edges_data.append({
                "id": edge.id,
                "source": edge.source_id,
                "target": edge.target_id,
                "label": edge.label,
                "metadata": edge.metadata
            })
            incoming_edges.setdefault(edge.target_id, []).append(edge.id)
            outgoing_edges.setdefault(edge.source_id, []).append(edge.id)

        return {
            "name": flowchart.name,
            "metadata": flowchart.metadata,
            "nodes": nodes_data,
            "edges": edges_data,
            "graph": {
                "incomingEdges": incoming_edges,
                "outgoingEdges": outgoing_edges
            }
        }

    @staticmethod
    def to_json(flowchart: FlowChart, indent: int = 2) -> str:
        return json.dumps(JsonSerializer.to_dict(flowchart), indent=indent)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> FlowChart:
        chart = FlowChart(name=data.get("name", "LoadedFlowChart"), metadata=data.get("metadata"))

        for node_data in data.get("nodes", []):
            chart.add_node(Node(
                node_id=node_data["id"],
                label=node_data.get("label", ""),
                x=node_data.get("x", 0.0),
                y=node_data.get("y", 0.0),
                width=node_data.get("width", 0.0),
                height=node_data.get("height", 0.0),
                metadata=node_data.get("metadata")
            ))

        for edge_data in data.get("edges", []):
            chart.add_edge(Edge(
                source_id=edge_data["source"],
                target_id=edge_data["target"],
                label=edge_data.get("label") or "",
                edge_id=edge_data.get("id"),
                metadata=edge_data.get("metadata")
            ))

        return chart

    @staticmethod
    def from_json(json_str: str) -> FlowChart:
        data = json.loads(json_str)
        return JsonSerializer.from_dict(data)
