"""Application entry point."""
from __future__ import annotations

import logging
from pathlib import Path
import sys

from PySide6 import QtWidgets

from ui.main_window import MainWindow

LOG_DIR = Path(__file__).resolve().parent / "logs"


def setup_logging() -> None:
    LOG_DIR.mkdir(exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(LOG_DIR / "app.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def main() -> None:
    setup_logging()
    app = QtWidgets.QApplication(sys.argv)
    initial = app.arguments()[1] if len(app.arguments()) > 1 else ""
    win = MainWindow(initial_path=initial)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
