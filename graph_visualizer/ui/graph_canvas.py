from __future__ import annotations

from typing import List, Optional, Tuple

from PySide6.QtCore import Qt, QPointF, QRectF, Signal
from PySide6.QtGui import QBrush, QColor, QFontMetricsF, QPainter, QPen
from PySide6.QtWidgets import QWidget

from graph_visualizer import config
from graph_visualizer.services import Button, EditorService

from .renderer import (
    DashedLine,
    FillCircle,
    FillRect,
    Line,
    Primitive,
    StrokeCircle,
    Text,
    render_frame,
)


class GraphCanvas(QWidget):
    """
    Editing surface:
    - left click on empty space creates a node;
    - left drag on a node moves it (edge weights follow);
    - right drag from node to node creates an edge.

    The widget only translates Qt mouse events into pointer events for
    EditorService and replays the frame built by render_frame().
    """

    # emitted after every handled event that changed the picture
    scene_changed = Signal()

    def __init__(self, service: Optional[EditorService] = None, parent=None) -> None:
        super().__init__(parent)
        self._service = service if service is not None else EditorService()

        self.setAutoFillBackground(True)
        palette = self.palette()
        palette.setColor(self.backgroundRole(), QColor(config.COLOR_BACKGROUND))
        self.setPalette(palette)
        self.setMinimumSize(200, 150)

    @property
    def service(self) -> EditorService:
        return self._service

    # ---------- mouse ----------

    @staticmethod
    def _button(event) -> Button:
        if event.button() == Qt.RightButton:
            return Button.SECONDARY
        return Button.PRIMARY

    def mousePressEvent(self, event):  # noqa: N802
        pos = event.position()
        self._after(self._service.pointer_down(pos.x(), pos.y(), self._button(event)))

    def mouseMoveEvent(self, event):  # noqa: N802
        pos = event.position()
        self._after(self._service.pointer_drag(pos.x(), pos.y()))

    def mouseReleaseEvent(self, event):  # noqa: N802
        pos = event.position()
        self._after(self._service.pointer_up(pos.x(), pos.y()))

    def _after(self, redraw: bool) -> None:
        if redraw:
            self.update()
            self.scene_changed.emit()

    # ---------- painting ----------

    def frame(self) -> List[Primitive]:
        metrics = QFontMetricsF(self.font())

        def measure(text: str) -> Tuple[float, float]:
            return metrics.horizontalAdvance(text), metrics.height()

        return render_frame(self._service.scene, self._service.state, measure)

    def paintEvent(self, event):  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        try:
            for item in self.frame():
                self._paint(painter, item)
        finally:
            painter.end()

    def _paint(self, painter: QPainter, item: Primitive) -> None:
        if isinstance(item, FillCircle):
            painter.setPen(Qt.NoPen)
            painter.setBrush(QBrush(QColor(item.color)))
            painter.drawEllipse(QPointF(item.cx, item.cy), item.radius, item.radius)

        elif isinstance(item, StrokeCircle):
            painter.setPen(QPen(QColor(item.color), item.width))
            painter.setBrush(Qt.NoBrush)
            painter.drawEllipse(QPointF(item.cx, item.cy), item.radius, item.radius)

        elif isinstance(item, Line):
            painter.setPen(QPen(QColor(item.color), item.width))
            painter.drawLine(QPointF(item.x1, item.y1), QPointF(item.x2, item.y2))

        elif isinstance(item, DashedLine):
            pen = QPen(QColor(item.color), item.width)
            pen.setCapStyle(Qt.RoundCap)
            pen.setJoinStyle(Qt.RoundJoin)
            # Qt dash lengths are in units of the pen width
            pen.setDashPattern([d / item.width for d in item.dashes])
            painter.setPen(pen)
            painter.drawLine(QPointF(item.x1, item.y1), QPointF(item.x2, item.y2))

        elif isinstance(item, FillRect):
            painter.fillRect(
                QRectF(item.x, item.y, item.width, item.height),
                QColor(item.color),
            )

        elif isinstance(item, Text):
            metrics = painter.fontMetrics()
            w = metrics.horizontalAdvance(item.text)
            painter.setPen(QColor(item.color))
            painter.drawText(
                QPointF(item.cx - w / 2, item.cy + metrics.ascent() / 2),
                item.text,
            )
