import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from graph_visualizer import config
from graph_visualizer.ui.main_window import MainWindow
from graph_visualizer.resources import load_theme


def configure_logging() -> None:
    level = os.environ.get(config.LOG_LEVEL_ENV, config.DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """
    Application entry point.
    Responsible only for:
    - logging setup;
    - creating the QApplication;
    - loading the style sheet;
    - showing the main window.
    """
    configure_logging()

    app = QApplication(sys.argv)

    load_theme(app)

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
