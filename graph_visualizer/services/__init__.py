from .interaction import (
    IDLE,
    Button,
    InteractionState,
    Mode,
    PointerDown,
    PointerDrag,
    PointerUp,
    handle_event,
)
from .editor_service import EditorService

__all__ = [
    "IDLE",
    "Button",
    "InteractionState",
    "Mode",
    "PointerDown",
    "PointerDrag",
    "PointerUp",
    "handle_event",
    "EditorService",
]
