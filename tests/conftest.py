"""Shared test fixtures."""

from __future__ import annotations

import os

# must be set before the first Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from graph_visualizer.models import Scene
from graph_visualizer.services import Button, EditorService


@pytest.fixture
def scene():
    return Scene()


@pytest.fixture
def service():
    return EditorService()


@pytest.fixture
def connect(service):
    """Secondary-button drag from one point to another."""

    def _connect(x1, y1, x2, y2):
        service.pointer_down(x1, y1, Button.SECONDARY)
        service.pointer_drag(x2, y2)
        service.pointer_up(x2, y2)

    return _connect
