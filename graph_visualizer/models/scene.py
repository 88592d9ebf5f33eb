from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Node:
    """
    Graph node placed by the user.
    index       – stable position in the scene's node list;
    x, y        – centre in canvas coordinates;
    label       – text drawn inside the circle;
    highlighted – True only while an edge drag hovers it as a target.
    """
    index: int
    x: float
    y: float
    label: str
    highlighted: bool = False


@dataclass
class Edge:
    """
    Undirected edge between two node indices.
    source is where the gesture started, target where it ended;
    weight is derived from the on-screen distance.
    """
    index: int
    source: int
    target: int
    weight: int

    def touches(self, node_index: int) -> bool:
        return node_index in (self.source, self.target)


class Scene:
    """
    Nodes and edges of the edited graph, both in creation order.
    Nodes are never removed, so indices stay valid for the whole session.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []

    # ----------------- basic methods -----------------

    @property
    def nodes(self) -> List[Node]:
        return self._nodes

    @property
    def edges(self) -> List[Edge]:
        return self._edges

    def node(self, index: int) -> Node:
        return self._nodes[index]

    def edge(self, index: int) -> Edge:
        return self._edges[index]

    def add_node(self, x: float, y: float, label: Optional[str] = None) -> Node:
        """
        Appends a node. Without an explicit label it gets "Node <count>",
        where count is taken before insertion.
        """
        index = len(self._nodes)
        if label is None:
            label = f"Node {index}"

        node = Node(index=index, x=x, y=y, label=label)
        self._nodes.append(node)
        return node

    def add_edge(self, source: int, target: int, weight: Optional[int] = None) -> Edge:
        """
        Appends an edge. Duplicates between the same pair are kept as
        separate edges. Without an explicit weight it is computed from the
        current endpoint positions.
        """
        if weight is None:
            weight = self._weight_between(source, target)

        edge = Edge(index=len(self._edges), source=source, target=target, weight=weight)
        self._edges.append(edge)
        return edge

    # ----------------- geometry updates -----------------

    def move_node(self, index: int, x: float, y: float) -> None:
        node = self._nodes[index]
        node.x = x
        node.y = y

    def edges_of(self, node_index: int) -> List[Edge]:
        """Edges that have the node as either endpoint."""
        return [e for e in self._edges if e.touches(node_index)]

    def recompute_weight(self, edge_index: int) -> int:
        edge = self._edges[edge_index]
        edge.weight = self._weight_between(edge.source, edge.target)
        return edge.weight

    def _weight_between(self, source: int, target: int) -> int:
        # local import: geometry depends on Node from this module
        from .geometry import edge_weight

        return edge_weight(self._nodes[source], self._nodes[target])

    # ----------------- highlight -----------------

    def set_highlight(self, index: Optional[int]) -> None:
        """Highlights one node (or none) and clears the flag on all others."""
        for node in self._nodes:
            node.highlighted = node.index == index

    def clear_highlights(self) -> None:
        self.set_highlight(None)
