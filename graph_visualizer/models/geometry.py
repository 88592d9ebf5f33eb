from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from graph_visualizer.config import DETECTION_RADIUS, WEIGHT_OFFSET

from .scene import Node


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def edge_weight(a: Node, b: Node) -> int:
    """
    Weight of an edge between two nodes:
    rounded centre-to-centre distance minus the visual offset.
    Overlapping nodes give a negative weight, it is not clamped.
    """
    return int(round(distance(a.x, a.y, b.x, b.y))) - WEIGHT_OFFSET


def midpoint(a: Node, b: Node) -> Tuple[float, float]:
    return (a.x + b.x) / 2, (a.y + b.y) / 2


def find_node(
        nodes: Sequence[Node],
        x: float,
        y: float,
        radius: float = DETECTION_RADIUS,
) -> Optional[Node]:
    """
    Returns the first node (in creation order) whose centre lies strictly
    closer than `radius` to (x, y), or None.

    The first match wins even when a later node is closer.
    """
    if not nodes:
        return None

    centres = np.array([(n.x, n.y) for n in nodes], dtype=float)
    dist = np.hypot(centres[:, 0] - x, centres[:, 1] - y)

    hits = np.flatnonzero(dist < radius)
    if hits.size == 0:
        return None
    return nodes[int(hits[0])]
