from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QApplication

logger = logging.getLogger(__name__)

DEFAULT_THEME = Path(__file__).resolve().parent / "theme.qss"


def load_theme(app: QApplication, qss_path: Optional[Path] = None) -> bool:
    """
    Applies the QSS style sheet to the application.
    A missing file is not an error: the default Qt style stays.
    """
    if qss_path is None:
        qss_path = DEFAULT_THEME

    if not qss_path.exists():
        logger.debug("Theme file %s not found, using default style", qss_path)
        return False

    with qss_path.open("r", encoding="utf-8") as f:
        app.setStyleSheet(f.read())
    return True
