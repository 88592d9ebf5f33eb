from __future__ import annotations

from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QLabel,
)

from graph_visualizer import config
from graph_visualizer.services import EditorService
from .graph_canvas import GraphCanvas


class MainWindow(QMainWindow):
    """
    Main window of the application.
    Top: instructions for the three gestures.
    Below: the editing canvas.
    """

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(config.WINDOW_TITLE)

        self._service = EditorService()
        self._init_ui()

        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

    def _init_ui(self) -> None:
        central = QWidget(self)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        self.instructions = QLabel(config.INSTRUCTIONS, central)
        self.instructions.setObjectName("instructions")
        self.instructions.setContentsMargins(10, 10, 10, 10)
        root_layout.addWidget(self.instructions)

        self.graph_canvas = GraphCanvas(self._service, central)
        root_layout.addWidget(self.graph_canvas, stretch=1)

        self.setCentralWidget(central)

    @property
    def service(self) -> EditorService:
        return self._service
