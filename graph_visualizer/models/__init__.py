from .scene import Node, Edge, Scene
from .geometry import distance, edge_weight, find_node, midpoint

__all__ = [
    "Node",
    "Edge",
    "Scene",
    "distance",
    "edge_weight",
    "find_node",
    "midpoint",
]
