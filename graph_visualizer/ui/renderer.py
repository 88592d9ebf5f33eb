"""
Frame description for the canvas.

render_frame() turns the scene and the current gesture state into a flat list
of drawing primitives; the Qt canvas only replays them with a QPainter.
Later primitives are painted over earlier ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple, Union

from graph_visualizer import config
from graph_visualizer.models import Scene, midpoint
from graph_visualizer.services import InteractionState, Mode

TextMetrics = Callable[[str], Tuple[float, float]]


# ---------- primitives ----------

@dataclass(frozen=True)
class FillCircle:
    cx: float
    cy: float
    radius: float
    color: str


@dataclass(frozen=True)
class StrokeCircle:
    cx: float
    cy: float
    radius: float
    color: str
    width: float


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float


@dataclass(frozen=True)
class DashedLine:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float
    dashes: Tuple[float, ...] = config.DASH_PATTERN


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class Text:
    """Text centred on (cx, cy)."""
    cx: float
    cy: float
    text: str
    color: str


Primitive = Union[FillCircle, StrokeCircle, Line, DashedLine, FillRect, Text]


def approximate_text_size(text: str) -> Tuple[float, float]:
    """Rough metrics for a default 12px UI font, used when no painter is at hand."""
    return 7.0 * len(text), 15.0


# ---------- frame ----------

def render_frame(
        scene: Scene,
        state: InteractionState,
        measure_text: TextMetrics = approximate_text_size,
) -> List[Primitive]:
    """
    Builds the frame in a fixed order:
    1) edges with their weight labels;
    2) provisional dashed edge while an edge is being dragged;
    3) nodes with their labels.
    """
    frame: List[Primitive] = []
    frame.extend(_edges(scene, measure_text))
    frame.extend(_provisional_edge(scene, state))
    frame.extend(_nodes(scene, state))
    return frame


def _edges(scene: Scene, measure_text: TextMetrics) -> List[Primitive]:
    items: List[Primitive] = []

    for edge in scene.edges:
        a = scene.node(edge.source)
        b = scene.node(edge.target)
        items.append(Line(a.x, a.y, b.x, b.y, config.COLOR_EDGE, config.EDGE_WIDTH))

        mx, my = midpoint(a, b)
        text = str(edge.weight)
        w, h = measure_text(text)
        pad = config.LABEL_PADDING

        items.append(
            FillRect(
                mx - w / 2 - pad,
                my - h / 2,
                w + 2 * pad,
                h,
                config.COLOR_EDGE_LABEL_BG,
            )
        )
        items.append(Text(mx, my, text, config.COLOR_EDGE_LABEL))

    return items


def _provisional_edge(scene: Scene, state: InteractionState) -> List[Primitive]:
    if state.mode is not Mode.CREATING_EDGE:
        return []
    if state.source is None or state.drag_point is None:
        return []

    source = scene.node(state.source)
    x, y = state.drag_point
    return [
        DashedLine(
            source.x,
            source.y,
            x,
            y,
            config.COLOR_PROVISIONAL_EDGE,
            config.EDGE_WIDTH,
        )
    ]


def node_fill(highlighted: bool, selected: bool) -> str:
    if highlighted:
        return config.COLOR_NODE_HIGHLIGHTED
    if selected:
        return config.COLOR_NODE_SELECTED
    return config.COLOR_NODE_BASE


def _nodes(scene: Scene, state: InteractionState) -> List[Primitive]:
    items: List[Primitive] = []
    r = config.NODE_RADIUS

    for node in scene.nodes:
        fill = node_fill(node.highlighted, node.index == state.selected)
        items.append(FillCircle(node.x, node.y, r, fill))
        items.append(
            StrokeCircle(node.x, node.y, r, config.COLOR_NODE_BORDER, config.EDGE_WIDTH)
        )
        items.append(Text(node.x, node.y, node.label, config.COLOR_NODE_LABEL))

    return items
