from __future__ import annotations

import logging
from typing import Optional

from graph_visualizer.models import Scene

from .interaction import (
    IDLE,
    Button,
    InteractionState,
    Mode,
    PointerDown,
    PointerDrag,
    PointerEvent,
    PointerUp,
    handle_event,
)

logger = logging.getLogger(__name__)


class EditorService:
    """
    Graph editing service for the GUI.
    Holds the scene and the state of the current gesture and feeds pointer
    events through the gesture state machine.
    """

    def __init__(self, scene: Optional[Scene] = None) -> None:
        self._scene = scene if scene is not None else Scene()
        self._state: InteractionState = IDLE

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def state(self) -> InteractionState:
        return self._state

    # ---------- pointer events ----------

    def pointer_down(self, x: float, y: float, button: Button = Button.PRIMARY) -> bool:
        return self.dispatch(PointerDown(x, y, button))

    def pointer_drag(self, x: float, y: float) -> bool:
        return self.dispatch(PointerDrag(x, y))

    def pointer_up(self, x: float, y: float) -> bool:
        return self.dispatch(PointerUp(x, y))

    def dispatch(self, event: PointerEvent) -> bool:
        """
        Applies the event and returns True if the canvas has to be repainted.
        """
        node_count = len(self._scene.nodes)
        edge_count = len(self._scene.edges)
        previous = self._state

        self._scene, self._state, redraw = handle_event(self._scene, self._state, event)

        self._log_changes(previous, node_count, edge_count)
        return redraw

    def _log_changes(self, previous: InteractionState, node_count: int, edge_count: int) -> None:
        for node in self._scene.nodes[node_count:]:
            logger.debug("Node created: %s at (%.0f, %.0f)", node.label, node.x, node.y)

        for edge in self._scene.edges[edge_count:]:
            source = self._scene.node(edge.source)
            target = self._scene.node(edge.target)
            logger.info(
                "Edge created between %s and %s (weight %d)",
                source.label,
                target.label,
                edge.weight,
            )

        if previous.mode is not self._state.mode and self._state.mode is not Mode.IDLE:
            logger.debug("Gesture started: %s on node %s", self._state.mode.value, self._state.selected)
