"""
Gesture state machine of the editor.

Pointer events come in as plain values (no Qt types), so the whole
press/drag/release logic runs without a display surface:

    scene, state, redraw = handle_event(scene, state, event)

The scene is mutated in place and returned; the interaction state is an
immutable value and every transition returns a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from graph_visualizer.models import Scene, find_node


class Mode(Enum):
    IDLE = "idle"
    MOVING_NODE = "moving"
    CREATING_EDGE = "creating-edge"


class Button(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


Point = Tuple[float, float]


@dataclass(frozen=True)
class PointerDown:
    x: float
    y: float
    button: Button = Button.PRIMARY


@dataclass(frozen=True)
class PointerDrag:
    x: float
    y: float


@dataclass(frozen=True)
class PointerUp:
    x: float
    y: float


PointerEvent = Union[PointerDown, PointerDrag, PointerUp]


@dataclass(frozen=True)
class InteractionState:
    """
    Transient state of the current gesture:
    - mode       – idle / moving a node / creating an edge;
    - selected   – index of the node the gesture started on;
    - source     – provisional edge source (only while creating an edge);
    - offset     – pointer minus node centre at gesture start;
    - drag_point – last pointer position, for the provisional edge line.
    """
    mode: Mode = Mode.IDLE
    selected: Optional[int] = None
    source: Optional[int] = None
    offset: Optional[Point] = None
    drag_point: Optional[Point] = None


IDLE = InteractionState()


def handle_event(
        scene: Scene,
        state: InteractionState,
        event: PointerEvent,
) -> Tuple[Scene, InteractionState, bool]:
    """
    Applies one pointer event.
    Returns (scene, new_state, redraw_needed). Never raises for any input:
    a gesture that does not make sense is simply ignored.
    """
    if isinstance(event, PointerDown):
        return _on_down(scene, state, event)
    if isinstance(event, PointerDrag):
        return _on_drag(scene, state, event)
    if isinstance(event, PointerUp):
        return _on_up(scene, state, event)
    raise TypeError(f"Unsupported pointer event: {event!r}")


# ---------- press ----------

def _on_down(scene: Scene, state: InteractionState, event: PointerDown):
    hit = find_node(scene.nodes, event.x, event.y)

    if hit is None:
        # click on empty space – the only way nodes are created
        scene.add_node(event.x, event.y)
        return scene, IDLE, True

    offset = (event.x - hit.x, event.y - hit.y)

    if event.button is Button.SECONDARY:
        new_state = InteractionState(
            mode=Mode.CREATING_EDGE,
            selected=hit.index,
            source=hit.index,
            offset=offset,
            drag_point=(event.x, event.y),
        )
    else:
        new_state = InteractionState(
            mode=Mode.MOVING_NODE,
            selected=hit.index,
            offset=offset,
        )

    return scene, new_state, True


# ---------- drag ----------

def _on_drag(scene: Scene, state: InteractionState, event: PointerDrag):
    if state.selected is None:
        return scene, state, False

    if state.mode is Mode.MOVING_NODE:
        dx, dy = state.offset or (0.0, 0.0)
        scene.move_node(state.selected, event.x - dx, event.y - dy)

        for edge in scene.edges_of(state.selected):
            scene.recompute_weight(edge.index)

        return scene, state, True

    if state.mode is Mode.CREATING_EDGE:
        target = find_node(scene.nodes, event.x, event.y)
        if target is not None and target.index != state.source:
            scene.set_highlight(target.index)
        else:
            scene.clear_highlights()

        return scene, replace(state, drag_point=(event.x, event.y)), True

    return scene, state, False


# ---------- release ----------

def _on_up(scene: Scene, state: InteractionState, event: PointerUp):
    if state.mode is Mode.CREATING_EDGE and state.source is not None:
        target = find_node(scene.nodes, event.x, event.y)
        if target is not None and target.index != state.source:
            scene.add_edge(state.source, target.index)

    scene.clear_highlights()
    return scene, IDLE, True
