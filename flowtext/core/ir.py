from typing import Dict, List, Optional, Any


class Node:
    """A labelled node in the flowtext graph."""
    def __init__(
        self,
        node_id: str,
        label: str = "",
        x: float = 0.0,
        y: float = 0.0,
        width: float = 0.0,
        height: float = 0.0,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.id = node_id
        self.label = label
        # Geometry is filled in by the builder's grid layout
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.metadata = metadata or {}

    def __repr__(self):
        return f"<{self.__class__.__name__} id={self.id} label='{self.label}'>"


class Edge:
    """Represents a connection between two nodes."""
    def __init__(self, source_id: str, target_id: str, label: str = "", edge_id: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
        self.id = edge_id
        self.source_id = source_id
        self.target_id = target_id
        self.label = label or ""
        self.metadata = metadata or {}

    def __repr__(self):
        return f"<Edge {self.source_id} -> {self.target_id} label='{self.label}'>"


class FlowChart:
    """Represents the entire graph built from one text document."""
    def __init__(self, name: str = "FlowChart", metadata: Optional[Dict[str, Any]] = None):
        self.name = name
        self.nodes: Dict[str, Node] = {}
        self.edges: List[Edge] = []
        self._edges_by_id: Dict[str, Edge] = {}
        self.metadata = metadata or {}
        self._next_edge = 0

    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise ValueError(f"Node with id {node.id} already exists.")
        self.nodes[node.id] = node
        return node

    def add_edge(self, edge: Edge) -> Edge:
        if edge.source_id not in self.nodes:
            raise ValueError(f"Source node {edge.source_id} does not exist.")
        if edge.target_id not in self.nodes:
            raise ValueError(f"Target node {edge.target_id} does not exist.")
        if edge.id is None:
            while f"e{self._next_edge}" in self._edges_by_id:
                self._next_edge += 1
            edge.id = f"e{self._next_edge}"
            self._next_edge += 1
        elif edge.id in self._edges_by_id:
            raise ValueError(f"Edge with id {edge.id} already exists.")
        self.edges.append(edge)
        self._edges_by_id[edge.id] = edge
        return edge

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self._edges_by_id.get(edge_id)

    def connected_node_ids(self) -> set:
        """Ids of nodes that appear as an endpoint of at least one edge."""
        ids = set()
        for edge in self.edges:
            ids.add(edge.source_id)
            ids.add(edge.target_id)
        return ids
